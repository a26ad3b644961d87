from .adapter import RequestDispatchAdapter
from .transport import PAYLOAD_TOO_LARGE, RequestsTransport, Transport

__all__ = ["RequestDispatchAdapter", "RequestsTransport", "Transport", "PAYLOAD_TOO_LARGE"]
