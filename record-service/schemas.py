"""
NLP Text Record Service - Schemas

Pydantic models for request validation, stored records and Swagger documentation.
"""

from pydantic import BaseModel, Field

# --- Request Models ---


class RecordRequest(BaseModel):
    """JSON request body for /record endpoint."""

    text: str = Field(
        ...,
        strict=True,
        description="Text to fingerprint and store (truncated past 1000 characters)",
    )

    model_config = {"json_schema_extra": {"example": {"text": "hello"}}}


# --- Stored Models ---


class TextRecord(BaseModel):
    """Record written to the store, one per /record call."""

    timestamp: int = Field(
        ...,
        description="Seconds since epoch at write time",
    )
    hash: str = Field(
        ...,
        description="MD5 hex digest of the untruncated input text",
    )
    text: str = Field(
        ...,
        description="Input text, truncated to 1000 characters plus '...'",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "timestamp": 1700000000,
                "hash": "5d41402abc4b2a76b9719d911017c592",
                "text": "hello",
            }
        }
    }


# --- Response Models ---


class HealthResponse(BaseModel):
    """Health check response."""

    status: str

    model_config = {"json_schema_extra": {"example": {"status": "Up"}}}
