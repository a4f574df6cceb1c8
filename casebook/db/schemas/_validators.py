"""Reusable field normalisers for form payloads."""
from typing import Optional
import re

_SHA256_RE = re.compile(r"^[0-9a-f]{64}$")


def required_text(value: str, field: str = "value") -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValueError(f"{field} must not be blank")
    return cleaned


def optional_text(value: Optional[str]) -> Optional[str]:
    """Collapse whitespace-only strings to None."""
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def sha256_hex(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip().lower()
    if not cleaned:
        return None
    if not _SHA256_RE.match(cleaned):
        raise ValueError("file_hash_sha256 must be 64 hexadecimal characters")
    return cleaned
