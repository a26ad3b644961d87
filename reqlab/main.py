from fastapi import FastAPI

from .routers.curl import router as curl_router
from .routers.fields import router as fields_router
from .routers.send import router as send_router
from reqlab.settings import LOG_LEVEL, TRANSPORT_TIMEOUT, VERSION
from reqlab.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(LOG_LEVEL) # Init Logging

# Create the FastAPI app instance
app = FastAPI(title="reqlab: curl translation & field classification", version=VERSION)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - version: package version
      - transport_timeout: seconds the outbound transport waits per request
    """
    return {
        "ok": True,
        "service": "reqlab",
        "version": VERSION,
        "transport_timeout": TRANSPORT_TIMEOUT,
    }

# Register API routers:
app.include_router(curl_router)
app.include_router(fields_router)
app.include_router(send_router)
