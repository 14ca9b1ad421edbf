"""
NLP Text Record Service - Configuration

All environment variables, constants, and settings in one place.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# --- Record Limits ---
MAX_TEXT_LENGTH = 1000
TRUNCATION_MARKER = "..."

# --- Auth ---
API_KEY_HEADER = "X-API-Key"

# --- Storage ---
DEFAULT_COLLECTION = "NLPText"

# --- API Configuration ---
API_VERSION = "1.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

# --- Service Info ---
SERVICE_NAME = "NLP Text Record Service"
SERVICE_DESCRIPTION = """
## Overview
Accepts a text payload, fingerprints it and stores one record per request.

## Record
- **timestamp**: seconds since epoch, set at write time
- **hash**: MD5 hex digest of the full input text
- **text**: input text, cut at 1000 characters with a trailing `...`

## Auth
Every route except `/health` requires the `X-API-Key` header.
"""


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    api_key: str = ""
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    gcp_project_id: str = ""
    collection: str = DEFAULT_COLLECTION


def parse_port(value) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        return DEFAULT_PORT
    return port if 0 < port < 65536 else DEFAULT_PORT


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName returns an int only for registered level names
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Unset or unparseable variables fall back to the hard-coded defaults above.
    """
    env = os.environ if environ is None else environ
    return Settings(
        api_key=env.get("API_KEY", ""),
        port=parse_port(env.get("PORT", DEFAULT_PORT)),
        log_level=parse_log_level(env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        gcp_project_id=env.get("GCP_PROJECT_ID", ""),
        collection=env.get("FIRESTORE_COLLECTION", DEFAULT_COLLECTION),
    )
