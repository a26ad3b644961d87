from reqlab.models import NormalizedRequest


def shell_quote(value: str) -> str:
    """Single-quote for POSIX shells: it's -> 'it'\\''s'."""
    return "'" + value.replace("'", "'\\''") + "'"


def generate_curl(request: NormalizedRequest) -> str:
    """
    Serialize a request back into a curl command.

    The output goes through `translate` unchanged: method is always
    explicit, cookies travel as a plain Cookie header and the body is sent
    with --data-raw so nothing is re-interpreted.
    """
    parts = [f"curl -X {request.method or 'GET'} {shell_quote(request.url)}"]
    for name, value in request.headers.items():
        parts.append(f"-H {shell_quote(f'{name}: {value}')}")
    if request.body is not None:
        parts.append(f"--data-raw {shell_quote(request.body)}")
    return " \\\n  ".join(parts)
