from reqlab.dispatch import RequestsTransport


def get_transport():
    # One session per request; tests swap this out via dependency_overrides
    transport = RequestsTransport()
    try:
        yield transport
    finally:
        transport.close()
