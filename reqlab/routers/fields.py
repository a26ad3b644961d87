from typing import Any, Dict, List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from reqlab.fields import classify, classify_query, extract_body_mappings
from reqlab.models import FieldMapping

router = APIRouter(prefix="/fields", tags=["fields"])


class ClassifyRequest(BaseModel):
    value: Any = None


class BodyFieldsRequest(BaseModel):
    body: Any = None                        # JSON text, a JSON value, or form text
    headers: Dict[str, str] = Field(default_factory=dict)
    do_not_test: List[str] = Field(default_factory=list)


class QueryFieldsRequest(BaseModel):
    url: str = ""


@router.post("/classify")
def classify_value(req: ClassifyRequest) -> Dict[str, str]:
    """Semantic type of a single value, e.g. {"value": "USD"} -> {"type": "currency"}."""
    return {"type": classify(req.value)}


@router.post("/body")
def body_fields(req: BodyFieldsRequest) -> FieldMapping:
    """
    Classify every leaf of a request body.

    Form bodies (per the Content-Type header) are keyed "form.<name>",
    JSON bodies by dot/bracket path. Unparsable bodies give {}.
    """
    return extract_body_mappings(req.body, req.headers, do_not_test=req.do_not_test)


@router.post("/query")
def query_fields(req: QueryFieldsRequest) -> FieldMapping:
    """Classify each query-string parameter of a URL."""
    return classify_query(req.url)
