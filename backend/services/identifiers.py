"""Diff record identifiers"""

from __future__ import annotations

import re
import uuid

UUID_PATTERN = (
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}"
)
_UUID_RE = re.compile(UUID_PATTERN)


def new_id() -> str:
    """Generate a fresh random (version 4) identifier"""
    return str(uuid.uuid4())


def is_valid_id(value: str) -> bool:
    """Check the canonical 8-4-4-4-12 UUID shape (versions 1-5, RFC variant)"""
    return _UUID_RE.fullmatch(value) is not None
