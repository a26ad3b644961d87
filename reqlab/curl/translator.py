import logging
import re
from typing import Dict, Optional

from reqlab.models import METHODS, NormalizedRequest
from .args import parse_args

log = logging.getLogger(__name__)

# Quoted body after a data flag, used when the argument walk found none
BODY_FALLBACKS = [
    re.compile(r"--data-raw\s+(['\"])(.*?)\1", re.S),
    re.compile(r"--data\s+(['\"])(.*?)\1", re.S),
    re.compile(r"--data-binary\s+(['\"])(.*?)\1", re.S),
]

DATA_FLAG_RE = re.compile(r"--data-raw|--data\b|--data-binary|(?:^|\s)-d(?:\s|$)")

COOKIE_QUOTED_RE = re.compile(r"(?:^|\s)(?:-b|--cookie)\s+(['\"])(.*?)\1", re.S)
COOKIE_BARE_RE = re.compile(r"(?:^|\s)(?:-b|--cookie)\s+([^\s'\"]\S*)")
COOKIE_PREFIX_RE = re.compile(r"^(?:set-)?cookie:\s*", re.I)


def normalize_text(curl_text: str) -> str:
    """Join backslash line continuations and trim."""
    return re.sub(r"\\\r?\n", " ", curl_text or "").strip()


def _fallback_body(text: str) -> Optional[str]:
    for pattern in BODY_FALLBACKS:
        m = pattern.search(text)
        if m:
            return m.group(2)
    return None


def resolve_method(explicit: Optional[str], body: Optional[str], text: str) -> str:
    """
    Explicit verb wins, except GET-with-body (treated as operator error) and
    verbs we don't support. Otherwise any data flag or body means POST.
    """
    verb = (explicit or "").strip().upper()
    if verb in METHODS and not (verb == "GET" and body is not None):
        return verb
    if verb and verb not in METHODS:
        log.warning("unsupported method %r in curl command; inferring instead", explicit)
    if body is not None or DATA_FLAG_RE.search(text):
        return "POST"
    return "GET"


def cookie_from_flag(text: str) -> str:
    """Value of a -b/--cookie flag with any Cookie:/Set-Cookie: prefix removed."""
    m = COOKIE_QUOTED_RE.search(text)
    raw = m.group(2) if m else None
    if raw is None:
        m = COOKIE_BARE_RE.search(text)
        raw = m.group(1) if m else ""
    return COOKIE_PREFIX_RE.sub("", raw.strip()).strip()


def translate(curl_text: str) -> NormalizedRequest:
    """
    Turn free-form curl text into a NormalizedRequest.

    Never raises: text with nothing usable comes back as
    GET with an empty url, no headers and no body.
    """
    text = normalize_text(curl_text)
    parsed = parse_args(text)

    body = parsed.body
    if body is None:
        body = _fallback_body(text)

    method = resolve_method(parsed.method, body, text)

    headers: Dict[str, str] = {}
    for key, value in parsed.headers:
        if key.lower() == "set-cookie":
            key = "Cookie"
        headers[key] = value

    # An explicit cookie flag always has the last word over header cookies
    cookie = cookie_from_flag(text)
    if cookie:
        for key in [k for k in headers if k.lower() == "cookie"]:
            del headers[key]
        headers["Cookie"] = cookie

    if not parsed.url:
        log.debug("no url found in curl text")

    return NormalizedRequest(method=method, url=parsed.url or "", headers=headers, body=body)
