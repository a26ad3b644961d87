import errno
import json
import logging
from typing import Dict, Optional, Protocol, Union

import requests

from reqlab.models import TransportResponse
from reqlab.settings import TRANSPORT_TIMEOUT, VERIFY_TLS

log = logging.getLogger(__name__)

Body = Union[str, bytes, None]

PAYLOAD_TOO_LARGE = "413 Payload Too Large (EPIPE)"


class Transport(Protocol):
    def send(self, url: str, method: str, headers: Dict[str, str], body: Body) -> TransportResponse:
        """Perform one request. Failures come back as a response-shaped value."""
        ...


def _is_broken_pipe(exc: BaseException) -> bool:
    # requests wraps the socket error a few levels deep
    seen = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        if isinstance(exc, BrokenPipeError) or getattr(exc, "errno", None) == errno.EPIPE:
            return True
        if any(_is_broken_pipe(a) for a in getattr(exc, "args", ()) if isinstance(a, BaseException)):
            return True
        exc = exc.__cause__ or exc.__context__
    return False


def _render_body(resp: requests.Response) -> str:
    """Decode the body as text; JSON gets re-indented when it parses."""
    text = resp.content.decode(resp.encoding or "utf-8", errors="replace")
    if "application/json" in resp.headers.get("Content-Type", ""):
        try:
            return json.dumps(json.loads(text), indent=2)
        except (ValueError, RecursionError):
            pass
    return text


class RequestsTransport:
    """
    Transport backed by a requests.Session.
    HTTP error statuses are returned, not raised; connection-level errors
    are folded into a status sentinel.
    """
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = TRANSPORT_TIMEOUT,
        verify: bool = VERIFY_TLS,
    ):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.verify = verify

    def send(self, url: str, method: str, headers: Dict[str, str], body: Body) -> TransportResponse:
        try:
            resp = self.session.request(
                method,
                url,
                headers=headers,
                data=body,
                timeout=self.timeout,
                verify=self.verify,
                allow_redirects=True,
            )
        except requests.RequestException as e:
            if _is_broken_pipe(e):
                log.warning("upload to %s aborted with EPIPE", url)
                return TransportResponse(status=PAYLOAD_TOO_LARGE, headers={}, body="")
            log.warning("%s %s failed: %s", method, url, e)
            return TransportResponse(status="Error", headers={}, body=str(e))

        return TransportResponse(
            status=f"{resp.status_code} {resp.reason or ''}".strip(),
            headers=dict(resp.headers),
            body=_render_body(resp),
        )

    def close(self):
        self.session.close()
