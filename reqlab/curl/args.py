import base64
import logging
import re
import shlex
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import quote

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# Flag table
# ---------------------------------------------------------------------

METHOD_FLAGS = {"-X", "--request"}
HEAD_FLAGS = {"-I", "--head"}
HEADER_FLAGS = {"-H", "--header"}
DATA_FLAGS = {"-d", "--data", "--data-ascii", "--data-raw", "--data-binary"}
URLENCODE_FLAGS = {"--data-urlencode"}
JSON_FLAGS = {"--json"}
COOKIE_FLAGS = {"-b", "--cookie"}
USER_FLAGS = {"-u", "--user"}
AGENT_FLAGS = {"-A", "--user-agent"}
REFERER_FLAGS = {"-e", "--referer"}
URL_FLAGS = {"--url"}

# Options we don't interpret but whose argument must not be taken for the URL
SKIP_WITH_VALUE = {
    "-o", "--output", "-x", "--proxy", "-m", "--max-time", "--connect-timeout",
    "-F", "--form", "--form-string", "-T", "--upload-file", "-w", "--write-out",
    "-c", "--cookie-jar", "-E", "--cert", "--cacert", "--key", "-K", "--config",
    "--retry", "--resolve", "--limit-rate", "-r", "--range", "-U", "--proxy-user",
    "--oauth2-bearer", "-D", "--dump-header",
}

# Short options that may carry their value attached: -XPOST, -HAccept:x
ATTACHED_SHORT = {"-X", "-H", "-d", "-b", "-u", "-A", "-e"}

VALUE_FLAGS = (
    METHOD_FLAGS | HEADER_FLAGS | DATA_FLAGS | URLENCODE_FLAGS | JSON_FLAGS
    | COOKIE_FLAGS | USER_FLAGS | AGENT_FLAGS | REFERER_FLAGS | URL_FLAGS
    | SKIP_WITH_VALUE
)


@dataclass
class ParsedArgs:
    """Raw result of walking the curl argument list, before normalization."""
    url: Optional[str] = None
    method: Optional[str] = None          # only set by an explicit flag
    headers: List[Tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None

    def add_body(self, chunk: str):
        # curl joins repeated data flags with '&'
        self.body = chunk if self.body is None else f"{self.body}&{chunk}"

    def has_header(self, name: str) -> bool:
        return any(k.lower() == name.lower() for k, _ in self.headers)


# A word is a run of quoted strings and bare characters; a quote with no
# partner is kept as a literal character.
WORD_RE = re.compile(r"""(?:'[^']*'|"(?:\\.|[^"\\])*"|[^\s'"]+|['"])+""")
SEGMENT_RE = re.compile(r"""'([^']*)'|"((?:\\.|[^"\\])*)"|([^\s'"]+|['"])""")


def loose_split(text: str) -> List[str]:
    """Quote-aware split that never fails, for text shlex rejects."""
    words = []
    for word in WORD_RE.finditer(text):
        parts = []
        for seg in SEGMENT_RE.finditer(word.group(0)):
            single, double, bare = seg.groups()
            if single is not None:
                parts.append(single)
            elif double is not None:
                parts.append(re.sub(r"\\(.)", r"\1", double))
            else:
                parts.append(bare)
        words.append("".join(parts))
    return words


def tokenize(text: str) -> List[str]:
    """Shell-split the command; unbalanced quotes fall back to a lenient split."""
    try:
        tokens = shlex.split(text, posix=True)
    except ValueError as e:
        log.debug("shlex could not split curl text (%s); using lenient split", e)
        tokens = loose_split(text)

    if tokens and tokens[0].lower() in ("curl", "curl.exe"):
        tokens = tokens[1:]
    return tokens


def _split_option(token: str) -> Tuple[str, Optional[str]]:
    """'--data=x' -> ('--data', 'x'); '-XPOST' -> ('-X', 'POST'); else (token, None)."""
    if token.startswith("--") and "=" in token:
        name, _, value = token.partition("=")
        if name in VALUE_FLAGS:
            return name, value
    if not token.startswith("--") and len(token) > 2 and token[:2] in ATTACHED_SHORT:
        return token[:2], token[2:]
    return token, None


def _urlencode_data(value: str) -> str:
    # --data-urlencode: "name=value" encodes only the value, "=value" drops the name
    name, sep, content = value.partition("=")
    if not sep:
        return quote(value, safe="")
    encoded = quote(content, safe="")
    return f"{name}={encoded}" if name else encoded


def parse_args(text: str) -> ParsedArgs:
    """
    Walk a curl command line and collect url / method / headers / body.

    Unknown flags are ignored. A value-taking flag at the very end of the
    command (no argument left) is ignored as well.
    """
    out = ParsedArgs()
    tokens = tokenize(text)
    json_body = False
    i = 0
    while i < len(tokens):
        flag, value = _split_option(tokens[i])
        i += 1

        if flag in VALUE_FLAGS and value is None:
            if i >= len(tokens):
                log.debug("flag %s has no argument", flag)
                break
            value = tokens[i]
            i += 1

        if flag in METHOD_FLAGS:
            out.method = value
        elif flag in HEAD_FLAGS:
            out.method = "HEAD"
        elif flag in HEADER_FLAGS:
            name, sep, hval = value.partition(":")
            if sep and name.strip():
                out.headers.append((name.strip(), hval.strip()))
        elif flag in DATA_FLAGS:
            out.add_body(value)
        elif flag in URLENCODE_FLAGS:
            out.add_body(_urlencode_data(value))
        elif flag in JSON_FLAGS:
            out.add_body(value)
            json_body = True
        elif flag in COOKIE_FLAGS:
            out.headers.append(("Set-Cookie", value))
        elif flag in USER_FLAGS:
            token = base64.b64encode(value.encode()).decode()
            out.headers.append(("Authorization", f"Basic {token}"))
        elif flag in AGENT_FLAGS:
            out.headers.append(("User-Agent", value))
        elif flag in REFERER_FLAGS:
            out.headers.append(("Referer", value))
        elif flag in URL_FLAGS:
            out.url = value
        elif flag in SKIP_WITH_VALUE:
            pass
        elif not flag.startswith("-") and out.url is None:
            out.url = flag

    # --json only fills in headers the command didn't set itself, in any position or case
    if json_body:
        for name in ("Content-Type", "Accept"):
            if not out.has_header(name):
                out.headers.append((name, "application/json"))
    return out
