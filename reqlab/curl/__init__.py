from .translator import translate, resolve_method, normalize_text
from .generator import generate_curl
from .args import parse_args, ParsedArgs

__all__ = [
    "translate",
    "resolve_method",
    "normalize_text",
    "generate_curl",
    "parse_args",
    "ParsedArgs",
]
