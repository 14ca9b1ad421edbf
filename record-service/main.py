"""
NLP Text Record Service

Application entry point. Sets up FastAPI app, middleware and all routes.
"""

import hmac
import logging
import time
from typing import Optional

import uvicorn
from api import router
from config import (
    API_KEY_HEADER,
    API_VERSION,
    SERVICE_DESCRIPTION,
    SERVICE_NAME,
    Settings,
    load_settings,
)
from fastapi import FastAPI, Request
from metrics import record_request
from response import ErrorCodes, error_response
from sink import FirestoreRecordSink, RecordSink

logger = logging.getLogger(__name__)


def is_auth_exempt(path: str) -> bool:
    return path.startswith("/health")


def check_api_key(provided: Optional[str], expected: str) -> bool:
    """
    Single static secret, compared in constant time.

    Header values arrive latin-1 decoded, so the raw header bytes are
    compared against the UTF-8 bytes of the configured secret.
    """
    if not provided or not expected:
        return False
    try:
        raw = provided.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return hmac.compare_digest(raw, expected.encode("utf-8"))


def create_app(settings: Settings, sink: Optional[RecordSink] = None) -> FastAPI:
    """
    Build the app for the given settings.

    Without an explicit sink, records go to the configured Firestore collection.
    """
    if sink is None:
        sink = FirestoreRecordSink(settings.collection, project=settings.gcp_project_id)

    app = FastAPI(
        title=SERVICE_NAME,
        description=SERVICE_DESCRIPTION,
        version=API_VERSION,
    )
    app.state.settings = settings
    app.state.sink = sink

    # --- Auth middleware ---
    @app.middleware("http")
    async def api_key_middleware(request: Request, call_next):
        if is_auth_exempt(request.url.path):
            return await call_next(request)

        provided = request.headers.get(API_KEY_HEADER)
        if not provided:
            logger.warning(f"rejected: missing API key path={request.url.path}")
            return error_response(ErrorCodes.UNAUTHORIZED, "missing API key", 401)
        if not check_api_key(provided, settings.api_key):
            logger.warning(f"rejected: invalid API key path={request.url.path}")
            return error_response(ErrorCodes.UNAUTHORIZED, "invalid API key", 401)
        return await call_next(request)

    # --- Request logging + metrics middleware ---
    @app.middleware("http")
    async def request_log_middleware(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            record_request(request.url.path)
            raise
        duration_ms = (time.perf_counter() - start) * 1000
        record_request(request.url.path)
        logger.info(
            f"request: method={request.method} path={request.url.path} "
            f"status={response.status_code} duration_ms={duration_ms:.1f}"
        )
        return response

    # --- Unhandled errors ---
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"unhandled error: method={request.method} path={request.url.path} error={exc!r}",
            exc_info=exc,
        )
        return error_response(ErrorCodes.INTERNAL_ERROR, "internal server error", 500)

    # --- Include routes ---
    app.include_router(router)
    return app


# --- Settings & logging ---
settings = load_settings()
logging.basicConfig(level=settings.log_level, format="%(message)s")

# --- App ---
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
