from reqlab.dispatch import RequestDispatchAdapter
from reqlab.models import NormalizedRequest, TransportResponse


def _json_request(**kw):
    base = dict(
        method="POST",
        url="http://x/api/echo?page=2&sort=name",
        headers={"Content-Type": "application/json"},
        body='{"trainer": {"email": "ash@kanto.org", "badges": 8}}',
    )
    base.update(kw)
    return NormalizedRequest(**base)


def test_success_classifies_request_body_and_query(make_transport):
    transport = make_transport(TransportResponse(status="201 Created", headers={}, body='{"id": 1}'))
    result = RequestDispatchAdapter(transport).dispatch(_json_request())

    assert result.response.status == "201 Created"
    assert result.field_mappings == {"trainer.email": "email", "trainer.badges": "number"}
    assert result.query_mappings == {"page": "number", "sort": "string"}
    call = transport.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://x/api/echo?page=2&sort=name"
    assert call["body"] == '{"trainer": {"email": "ash@kanto.org", "badges": 8}}'


def test_non_2xx_returns_empty_mappings(make_transport):
    transport = make_transport(TransportResponse(status="500 Internal Server Error", headers={}, body="boom"))
    result = RequestDispatchAdapter(transport).dispatch(_json_request())
    assert result.response.body == "boom"
    assert result.field_mappings == {}
    assert result.query_mappings == {}


def test_transport_exception_becomes_network_error(make_transport):
    transport = make_transport(error=ConnectionError("refused"))
    result = RequestDispatchAdapter(transport).dispatch(_json_request())
    assert result.response.status == "Network Error"
    assert result.response.headers == {}
    assert "refused" in result.response.body
    assert result.field_mappings == {}


def test_form_body_is_percent_encoded(make_transport):
    transport = make_transport()
    req = NormalizedRequest(
        method="POST",
        url="http://x/login",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        body="user=misty waterflower\nemail=misty@cerulean.gym",
    )
    result = RequestDispatchAdapter(transport).dispatch(req)
    assert transport.calls[0]["body"] == "user=misty+waterflower&email=misty%40cerulean.gym"
    assert result.field_mappings == {"form.user": "string", "form.email": "email"}


def test_forced_form_injects_content_type(make_transport):
    transport = make_transport()
    req = NormalizedRequest(method="POST", url="http://x/login", headers={}, body="a=1&b=2")
    result = RequestDispatchAdapter(transport).dispatch(req, form=True)
    sent = transport.calls[0]
    assert sent["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert sent["body"] == "a=1&b=2"
    assert result.field_mappings == {"form.a": "number", "form.b": "number"}


def test_encoded_body_replaces_payload_but_not_mappings(make_transport):
    transport = make_transport()
    payload = b"\x08\x05\x12\x03abc"
    result = RequestDispatchAdapter(transport).dispatch(
        _json_request(url="http://x/pb"), encoded_body=payload
    )
    assert transport.calls[0]["body"] == payload
    assert result.field_mappings == {"trainer.email": "email", "trainer.badges": "number"}


def test_do_not_test_paths_are_passed_through(make_transport):
    transport = make_transport()
    result = RequestDispatchAdapter(transport).dispatch(
        _json_request(body='{"id": "abc", "n": 1}'), do_not_test=["id"]
    )
    assert result.field_mappings == {"id": "do-not-test", "n": "number"}


def test_request_headers_are_not_mutated(make_transport):
    transport = make_transport()
    req = NormalizedRequest(method="POST", url="http://x", headers={}, body="a=1")
    RequestDispatchAdapter(transport).dispatch(req, form=True)
    assert req.headers == {}
