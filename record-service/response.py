"""
NLP Text Record Service - Standardized Response Models

Provides consistent error structure across all endpoints.
"""

from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")

    model_config = {
        "json_schema_extra": {"example": {"code": "VALIDATION_ERROR", "message": "text required"}}
    }


class APIResponse(BaseModel):
    """Standardized API response structure."""

    success: bool = Field(..., description="Whether the request was successful")
    data: Optional[Any] = Field(None, description="Response data on success")
    error: Optional[ErrorDetail] = Field(None, description="Error details on failure")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "data": None,
                "error": {"code": "UNAUTHORIZED", "message": "invalid API key"},
            }
        }
    }


# --- Helper functions ---


def error_response(code: str, message: str, status_code: int = 400) -> JSONResponse:
    """Create an error response."""
    return JSONResponse(
        content={
            "success": False,
            "data": None,
            "error": {"code": code, "message": message},
        },
        status_code=status_code,
    )


def error_example(code: str, message: str) -> dict:
    """OpenAPI example body for an error envelope."""
    return {
        "application/json": {
            "example": {
                "success": False,
                "data": None,
                "error": {"code": code, "message": message},
            }
        }
    }


# --- Error codes ---


class ErrorCodes:
    """Standardized error codes."""

    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_JSON = "INVALID_JSON"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    STORE_ERROR = "STORE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
