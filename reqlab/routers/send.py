import base64
import binascii
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from reqlab.deps import get_transport
from reqlab.dispatch import RequestDispatchAdapter, Transport
from reqlab.models import DispatchResult, NormalizedRequest

log = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["send"])


class SendRequest(BaseModel):
    request: NormalizedRequest
    encoded_body: Optional[str] = None      # base64 of a pre-encoded binary message
    form: Optional[bool] = None             # None -> decide from Content-Type
    do_not_test: List[str] = Field(default_factory=list)


@router.post("/send", response_model=DispatchResult, response_model_by_alias=True)
def send(req: SendRequest, transport: Transport = Depends(get_transport)) -> DispatchResult:
    """
    Send a normalized request and build test mappings from it.

    Response JSON:
      {
        "response": {"status": "200 OK", "headers": {...}, "body": "..."},
        "fieldMappings": {"level": "number"},
        "queryMappings": {"page": "number"}
      }

    Transport failures and non-2xx statuses are still a 200 here: the
    failure is described in response.status and both mappings are empty.
    """
    if not req.request.url.strip():
        raise HTTPException(400, "Request has no url")

    encoded: Optional[bytes] = None
    if req.encoded_body is not None:
        try:
            encoded = base64.b64decode(req.encoded_body, validate=True)
        except (binascii.Error, ValueError) as e:
            raise HTTPException(400, f"encoded_body is not valid base64: {e}")

    adapter = RequestDispatchAdapter(transport)
    result = adapter.dispatch(
        req.request, encoded_body=encoded, form=req.form, do_not_test=req.do_not_test
    )
    log.info("%s %s -> %s", req.request.method, req.request.url, result.response.status)
    return result
