"""
Utilities for safe logging of shift data
"""

import re
from hashlib import blake2b
from typing import Union

# Keys whose values never reach the logs
REDACT_KEYS = {
    "notes",
    "tags",
    "authorization",
    "cookie",
    "password",
    "token",
    "email",
    "phone",
    "secret",
}


def hash_id(value: Union[int, str], salt: str = "shiftly") -> str:
    """
    Create a short stable hash for shift and entity IDs using blake2b

    Args:
        value: ID to hash (int, str or UUID)
        salt: Salt mixed into the hash

    Returns:
        Hashed ID as hex string
    """
    h = blake2b(digest_size=8)
    h.update(f"{salt}:{value}".encode())
    return h.hexdigest()


def err_tag(exc: BaseException) -> str:
    """
    Extract safe error tag from exception for logging

    Args:
        exc: Exception instance

    Returns:
        Safe error tag with sanitized message content
    """
    for attr in ("safe_message", "public_message"):
        msg = getattr(exc, attr, None)
        if msg:
            return str(msg)[:120]

    text = str(exc)

    # Simple sanitization from emails and long tokens
    text = re.sub(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}", "***@***", text)
    text = re.sub(r"\b(?:Bearer\s+)?[A-Za-z0-9._-]{16,}\b", "****", text)

    return text[:120] if text.strip() else exc.__class__.__name__


def safe_val(v):
    """Safe value representation preserving type info"""
    if isinstance(v, (bytes, bytearray)):
        return f"<{len(v)} bytes>"
    if isinstance(v, str) and len(v) > 64:
        return f"<{len(v)} chars>"
    return v


def redact(val):
    """
    Recursively redact sensitive values from any data structure

    Args:
        val: Value to redact (dict, list, tuple, str, etc.)

    Returns:
        Redacted version preserving structure but hiding sensitive data
    """
    if isinstance(val, dict):
        return {
            k: ("***" if isinstance(k, str) and k.lower() in REDACT_KEYS else redact(v))
            for k, v in val.items()
        }
    if isinstance(val, (list, tuple)):
        return [redact(v) for v in val]
    return safe_val(val)
