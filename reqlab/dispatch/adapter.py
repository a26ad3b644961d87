import logging
from typing import Iterable, Optional

from reqlab.fields import classify_query, extract_body_mappings
from reqlab.fields.base import Classifier
from reqlab.httputil import (
    FORM_CONTENT_TYPE,
    encode_form_entries,
    get_header_value,
    is_success,
    is_url_encoded,
    parse_form_data,
)
from reqlab.models import DispatchResult, NormalizedRequest, TransportResponse
from .transport import Body, Transport

log = logging.getLogger(__name__)


class RequestDispatchAdapter:
    """
    Hands a NormalizedRequest to a transport and, when the call succeeds,
    classifies the *request* body and query string for test generation.
    """
    def __init__(self, transport: Transport, classifier: Optional[Classifier] = None):
        self.transport = transport
        self.classifier = classifier

    def prepare(
        self,
        request: NormalizedRequest,
        *,
        encoded_body: Optional[bytes] = None,
        form: Optional[bool] = None,
    ) -> tuple[dict, Body]:
        """Headers and body exactly as the transport should receive them."""
        headers = dict(request.headers)
        is_form = is_url_encoded(headers) if form is None else form
        body: Body = request.body

        if is_form:
            if not get_header_value(headers, "content-type"):
                headers["Content-Type"] = FORM_CONTENT_TYPE
            if encoded_body is None and request.body is not None:
                body = encode_form_entries(parse_form_data(request.body))
        elif encoded_body is not None:
            body = encoded_body

        return headers, body

    def dispatch(
        self,
        request: NormalizedRequest,
        *,
        encoded_body: Optional[bytes] = None,
        form: Optional[bool] = None,
        do_not_test: Iterable[str] = (),
    ) -> DispatchResult:
        headers, body = self.prepare(request, encoded_body=encoded_body, form=form)

        try:
            response = self.transport.send(request.url, request.method, headers, body)
        except Exception as e:
            # transports are supposed to fold their own errors; keep the flow alive anyway
            log.exception("transport raised for %s %s", request.method, request.url)
            response = TransportResponse(status="Network Error", headers={}, body=str(e))

        if not is_success(response.status):
            return DispatchResult(response=response)

        # Mappings describe what we sent, so they come from the original body
        field_mappings = extract_body_mappings(
            request.body, headers, do_not_test=do_not_test, classifier=self.classifier
        )
        query_mappings = classify_query(request.url, classifier=self.classifier)
        return DispatchResult(
            response=response,
            field_mappings=field_mappings,
            query_mappings=query_mappings,
        )
