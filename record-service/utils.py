"""
NLP Text Record Service - Record Utilities

Hashing, truncation and record construction.
"""

import hashlib
import re
import time
from typing import Optional

from config import MAX_TEXT_LENGTH, TRUNCATION_MARKER
from schemas import TextRecord

LONE_SURROGATE = re.compile("[\ud800-\udfff]")
REPLACEMENT_CHAR = "\ufffd"


def replace_surrogates(text: str) -> str:
    """Replace unpaired surrogates (valid JSON escapes, invalid UTF-8) with U+FFFD."""
    return LONE_SURROGATE.sub(REPLACEMENT_CHAR, text)


def content_hash(text: str) -> str:
    """
    Fingerprint text with an MD5 hex digest.

    The digest identifies content; it is not used for integrity.
    """
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def truncate_text(text: str) -> str:
    """
    Cap text at MAX_TEXT_LENGTH characters.

    Longer text keeps its first MAX_TEXT_LENGTH characters followed by
    TRUNCATION_MARKER.
    """
    if len(text) > MAX_TEXT_LENGTH:
        return text[:MAX_TEXT_LENGTH] + TRUNCATION_MARKER
    return text


def build_record(text: str, now: Optional[float] = None) -> TextRecord:
    """
    Build the record stored for a /record call.

    Args:
        text: Original request text
        now: Epoch seconds to stamp, defaults to the current time

    Returns:
        TextRecord hashed over the full text, with truncated text
    """
    if now is None:
        now = time.time()
    text = replace_surrogates(text)
    return TextRecord(
        timestamp=int(now),
        hash=content_hash(text),
        text=truncate_text(text),
    )
