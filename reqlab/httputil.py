import json
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

FormEntries = List[Tuple[str, str]]


def get_header_value(headers: Mapping[str, Any], name: str) -> str:
    """Case-insensitive header lookup; '' when the header is missing."""
    for key, value in (headers or {}).items():
        if key.lower() == name.lower():
            return str(value)
    return ""


def is_url_encoded(headers: Mapping[str, Any]) -> bool:
    return bool(re.search(FORM_CONTENT_TYPE, get_header_value(headers, "content-type"), re.I))


def parse_form_data(raw: Optional[str]) -> FormEntries:
    """
    Split a form body into (key, value) pairs.

    Two shapes are accepted:
      * one ``key=value`` per line (how form bodies are typed by hand),
        values kept raw;
      * a single ``a=1&b=2`` line as produced by curl ``-d``, which is
        percent-decoded.
    """
    text = (raw or "").strip()
    if not text:
        return []
    if "\n" not in text:
        return parse_qsl(text, keep_blank_values=True)

    entries: FormEntries = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        key, sep, value = line.partition("=")
        entries.append((key.strip(), value.strip() if sep else ""))
    return entries


def encode_form_entries(entries: FormEntries) -> str:
    return urlencode(entries)


def extract_query_params(url: str) -> Dict[str, str]:
    """Query string as a flat dict; a repeated key keeps its last value."""
    try:
        query = urlsplit(url or "").query
    except ValueError:
        return {}
    return dict(parse_qsl(query, keep_blank_values=True))


def try_parse_json(value: Any) -> Any:
    """Decode a JSON string; anything that doesn't decode is returned unchanged."""
    if not isinstance(value, (str, bytes)):
        return value
    try:
        return json.loads(value)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow
        return value


def extract_status_code(status: str) -> int:
    """'201 Created' -> 201; sentinels like 'Network Error' -> 0."""
    head = (status or "").strip().split(" ")[0]
    return int(head) if head.isdigit() else 0


def is_success(status: str) -> bool:
    return 200 <= extract_status_code(status) < 300
