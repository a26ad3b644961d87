from typing import Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

# -----------------------------
# Value objects shared by the translator, classifier and dispatcher
# -----------------------------
Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")

FieldType = Literal[
    "email",
    "url",
    "ftp_url",
    "phone",
    "number",
    "boolean",
    "currency",
    "date_yyyy_mm_dd",
    "string",
    "do-not-test",
]

# path -> semantic type, e.g. {"user.addresses[0].city": "string"}
FieldMapping = Dict[str, FieldType]


class NormalizedRequest(BaseModel):
    # Canonical request reconstructed from a curl command
    method: Method = "GET"
    url: str = ""                                    # may hold {{variables}}
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[str] = None                       # None when no data flag


class TransportResponse(BaseModel):
    # What a transport hands back; status is "200 OK" or an error sentinel
    status: str
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""


class DispatchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response: TransportResponse
    field_mappings: FieldMapping = Field(default_factory=dict, alias="fieldMappings")
    query_mappings: FieldMapping = Field(default_factory=dict, alias="queryMappings")
