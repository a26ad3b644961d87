import re
from typing import Any, Callable, List, Tuple
from reqlab.models import FieldType

# --- Pattern helpers (one compiled regex per semantic type) ---

BOOLEAN_RE = re.compile(r"^(true|false)$", re.I)
NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_RE = re.compile(r"^https?://[^\s$.?#].[^\s]*$", re.I)
FTP_URL_RE = re.compile(r"^ftp://[^\s$.?#].[^\s]*$", re.I)
# ISO dates are 10 chars of digits and hyphens; keep them out of phone
PHONE_RE = re.compile(r"^(?!\d{4}-\d{2}-\d{2}$)\+?[0-9 \-()]{7,20}$")
CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _matches(pattern: re.Pattern) -> Callable[[Any], bool]:
    return lambda v: isinstance(v, str) and pattern.fullmatch(v) is not None


def is_boolean(v: Any) -> bool:
    """Native bool, or the words true/false in any case."""
    return isinstance(v, bool) or _matches(BOOLEAN_RE)(v)


def is_number(v: Any) -> bool:
    """Native int/float (bool excluded), or a plain decimal string."""
    if isinstance(v, bool):
        return False
    return isinstance(v, (int, float)) or _matches(NUMBER_RE)(v)


# Evaluated top to bottom, first hit wins. Several patterns overlap
# ("1234567" is both number and phone, "USD" is any 3 uppercase letters),
# so the order here is the classification rule.
DETECTORS: List[Tuple[FieldType, Callable[[Any], bool]]] = [
    ("boolean", is_boolean),
    ("number", is_number),
    ("email", _matches(EMAIL_RE)),
    ("url", _matches(URL_RE)),
    ("ftp_url", _matches(FTP_URL_RE)),
    ("phone", _matches(PHONE_RE)),
    ("currency", _matches(CURRENCY_RE)),
    ("date_yyyy_mm_dd", _matches(DATE_RE)),
]


def classify(value: Any) -> FieldType:
    for tag, predicate in DETECTORS:
        if predicate(value):
            return tag
    return "string"


class RuleClassifier:
    """
    Regex cascade classifier.
    Stateless; exists so callers can swap in their own `Classifier`.
    """
    def classify(self, value: Any) -> FieldType:
        return classify(value)
