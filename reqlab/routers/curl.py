from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from reqlab.curl import generate_curl, translate
from reqlab.models import NormalizedRequest

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/curl", tags=["curl"])


# Request schema: the raw command as pasted by the user
class TranslateRequest(BaseModel):
    curl: str


@router.post("/translate")
def translate_curl(req: TranslateRequest) -> NormalizedRequest:
    """
    Convert a pasted curl command into a normalized request.

    Request body:
      {"curl": "curl 'http://x/api' -H 'Accept: application/json'"}

    Response JSON:
      {"method": "GET", "url": "http://x/api",
       "headers": {"Accept": "application/json"}, "body": null}

    Malformed commands are not an error: they come back with whatever
    could be recovered (possibly an empty url).
    """
    if not (req.curl or "").strip():
        raise HTTPException(400, "Missing 'curl'")
    return translate(req.curl)


@router.post("/generate")
def generate(req: NormalizedRequest) -> dict:
    """Serialize a normalized request back into a curl command."""
    return {"curl": generate_curl(req)}
