import logging
from typing import Any, Iterable, Mapping, Optional, Tuple

from reqlab.httputil import extract_query_params, is_url_encoded, parse_form_data, try_parse_json
from reqlab.models import FieldMapping
from .base import Classifier
from .detectors import RuleClassifier

log = logging.getLogger(__name__)


def extract_fields(
    tree: Any, do_not_test: Iterable[str] = (), classifier: Optional[Classifier] = None
) -> FieldMapping:
    """
    Walk a JSON-shaped value and classify every leaf.

    Paths use dots for object keys and [i] for list indices, with no
    leading separator: {"a": {"b": [1]}} -> "a.b[0]". Paths listed in
    `do_not_test` are tagged "do-not-test" instead of being classified.
    A scalar root has no path, so it yields an empty mapping.
    """
    classifier = classifier or RuleClassifier()
    skip = set(do_not_test)
    out: FieldMapping = {}

    # explicit stack: request bodies can nest deeper than the recursion limit
    stack = [(tree, "")]
    while stack:
        node, path = stack.pop()
        if isinstance(node, dict):
            children = [(child, f"{path}.{key}" if path else str(key)) for key, child in node.items()]
        elif isinstance(node, list):
            children = [(child, f"{path}[{i}]") for i, child in enumerate(node)]
        else:
            if path:
                out[path] = "do-not-test" if path in skip else classifier.classify(node)
            continue
        stack.extend(reversed(children))
    return out


def classify_form(
    entries: Iterable[Tuple[str, str]], classifier: Optional[Classifier] = None
) -> FieldMapping:
    """Form pairs -> {"form.<key>": type}. Later duplicates win."""
    classifier = classifier or RuleClassifier()
    return {f"form.{key}": classifier.classify(value) for key, value in entries}


def classify_query(url: str, classifier: Optional[Classifier] = None) -> FieldMapping:
    classifier = classifier or RuleClassifier()
    return {key: classifier.classify(value) for key, value in extract_query_params(url).items()}


def extract_body_mappings(
    body: Any,
    headers: Mapping[str, str],
    do_not_test: Iterable[str] = (),
    classifier: Optional[Classifier] = None,
) -> FieldMapping:
    """
    Classify a request body the way its Content-Type says it is encoded:
    form bodies by entry, everything else as JSON. Bodies that don't
    decode to an object or array produce no fields.
    """
    if body is None:
        return {}
    if is_url_encoded(headers):
        return classify_form(parse_form_data(str(body)), classifier=classifier)

    tree = try_parse_json(body)
    if not isinstance(tree, (dict, list)):
        log.debug("body is not a JSON object/array; no fields extracted")
        return {}
    return extract_fields(tree, do_not_test=do_not_test, classifier=classifier)
