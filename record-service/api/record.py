"""
NLP Text Record Service - Record Endpoint

POST /record - Hashes and truncates text, writes one record to the store
"""

import logging

from config import MAX_TEXT_LENGTH
from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from metrics import record_store_failure, record_stored
from pydantic import ValidationError
from response import APIResponse, ErrorCodes, error_example, error_response
from schemas import RecordRequest
from utils import build_record

# --- Logging ---
logger = logging.getLogger(__name__)

# --- Router ---
router = APIRouter(tags=["Records"])


@router.post(
    "/record",
    summary="Store a text record",
    description="""
Accepts a JSON body with a `text` string and stores one record for it.

Requires the `X-API-Key` header.

## Processing

1. **Validate**: `text` must be present and a string
2. **Hash**: MD5 hex digest of the full text
3. **Truncate**: text longer than 1000 characters keeps its first 1000 plus `...`
4. **Store**: one document with `timestamp`, `hash` and `text`

Identical texts are stored as separate records.
    """,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": RecordRequest.model_json_schema()}},
        }
    },
    responses={
        200: {
            "description": "Record stored, body is `null`",
            "content": {"application/json": {"example": None}},
        },
        400: {
            "model": APIResponse,
            "description": "Invalid JSON or missing/non-string text",
            "content": error_example(ErrorCodes.VALIDATION_ERROR, "text required (string)"),
        },
        401: {
            "model": APIResponse,
            "description": "Missing or invalid API key",
            "content": error_example(ErrorCodes.UNAUTHORIZED, "invalid API key"),
        },
        500: {
            "model": APIResponse,
            "description": "Store write failed",
            "content": error_example(ErrorCodes.STORE_ERROR, "failed to store record"),
        },
    },
)
async def write_record(request: Request):
    try:
        body = await request.json()
    except Exception as e:
        logger.error(f"invalid JSON body: {e}")
        return error_response(ErrorCodes.INVALID_JSON, "invalid JSON", 400)

    try:
        payload = RecordRequest.model_validate(body)
    except ValidationError as e:
        logger.error(f"invalid record request: {e.errors(include_url=False)}")
        return error_response(ErrorCodes.VALIDATION_ERROR, "text required (string)", 400)

    record = build_record(payload.text)

    sink = request.app.state.sink
    try:
        await run_in_threadpool(sink.put, record)
    except Exception:
        record_store_failure()
        logger.exception(f"store write failed: hash={record.hash}")
        return error_response(ErrorCodes.STORE_ERROR, "failed to store record", 500)

    record_stored()
    logger.info(
        f"stored: hash={record.hash} chars={len(payload.text)} "
        f"truncated={len(payload.text) > MAX_TEXT_LENGTH}"
    )
    return JSONResponse(content=None, status_code=200)
