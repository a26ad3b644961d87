import logging, sys
from typing import Iterable

from reqlab.settings import LOG_LEVEL

HANDLER_NAME = "reqlab"

# Libraries that log every outbound request at INFO
QUIET_LOGGERS = ("urllib3", "requests")


def setup_logging(level: str = LOG_LEVEL, quiet: Iterable[str] = QUIET_LOGGERS):
    """Attach the reqlab stdout handler to the root logger, once."""
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # other handlers (pytest capture, uvicorn) may already be attached
    if any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        return
    h = logging.StreamHandler(sys.stdout)
    h.set_name(HANDLER_NAME)
    h.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s [%(process)d] :: %(message)s"
    ))
    logger.addHandler(h)
