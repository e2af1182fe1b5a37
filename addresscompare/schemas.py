from pydantic import BaseModel, Field, field_validator

from .config import settings

# Shown to API callers when a field is missing or blank.
REQUIRED_MESSAGES: dict[str, str] = {
    "address1": "First address is required",
    "address2": "Second address is required",
}


class CompareRequest(BaseModel):
    address1: str = Field(..., min_length=1)
    address2: str = Field(..., min_length=1)

    @field_validator("address1", "address2")
    @classmethod
    def _bounded_length(cls, v: str) -> str:
        limit = settings.MAX_ADDRESS_LENGTH
        if len(v) > limit:
            raise ValueError(f"Address must be at most {limit} characters")
        return v


class CompareResponse(BaseModel):
    match: bool
    match_percentage: float = Field(..., ge=0, le=100, serialization_alias="matchPercentage")
    details: str


class ErrorOut(BaseModel):
    error: str
    details: str | None = None
