# reqlab/settings.py
import os

from dotenv import load_dotenv

# Values from a local .env; real environment variables still win
load_dotenv()

VERSION = "0.1.0"

LOG_LEVEL = os.getenv("REQLAB_LOG_LEVEL", "INFO")

# Seconds the outbound transport waits for a response
TRANSPORT_TIMEOUT = float(os.getenv("REQLAB_TRANSPORT_TIMEOUT", "30"))

# Set REQLAB_VERIFY_TLS=false to talk to self-signed dev servers
VERIFY_TLS = os.getenv("REQLAB_VERIFY_TLS", "true").lower() in ("1", "true", "yes")
