"""Free-text sanitizer applied to every form field before validation."""

from __future__ import annotations

import re

_PATTERNS = (
    re.compile(r"<[^>]*>"),
    re.compile(r"[<>]"),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+=", re.IGNORECASE),
)


def sanitize(raw: object) -> str:
    """Strip markup, script schemes and inline handlers, then trim.

    Non-string input yields ``""``. The substitutions are repeated until
    nothing changes, so a payload that only becomes dangerous after one
    pass (``"javajavascript:script:"``) is cleaned too and the function
    is idempotent.
    """
    if not isinstance(raw, str):
        return ""

    current = raw
    while True:
        cleaned = current
        for pattern in _PATTERNS:
            cleaned = pattern.sub("", cleaned)
        cleaned = cleaned.strip()
        if cleaned == current:
            return cleaned
        current = cleaned
