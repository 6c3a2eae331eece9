"""Bounded numeric validation for raw form values."""

from __future__ import annotations

import logging
import re

from starjet.domain.model.value_objects import NumericResult
from starjet.domain.service.sanitizer import sanitize

logger = logging.getLogger(__name__)

# Leading float literal; anything after it is ignored (``"12kg"`` -> 12.0).
_LEADING_FLOAT = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_float(text: str) -> float | None:
    """Parse the leading number of *text*, or return None if there is none."""
    match = _LEADING_FLOAT.match(text.lstrip())
    if match is None:
        return None
    return float(match.group(0))


def validate_numeric(value: object, minimum: float, maximum: float) -> NumericResult:
    """Sanitize, parse and range-check *value* against ``[minimum, maximum]``.

    Never raises. Unparsable input gives ``NumericResult(False, 0.0)``;
    an out-of-range number is returned flagged invalid.
    """
    text = sanitize("" if value is None else str(value))
    parsed = parse_float(text)

    if parsed is None:
        logger.debug("Invalid numeric input: %r", value)
        return NumericResult(valid=False, value=0.0)

    if parsed < minimum or parsed > maximum:
        logger.debug(
            "Numeric input %s out of bounds (min: %s, max: %s)", parsed, minimum, maximum
        )
        return NumericResult(valid=False, value=parsed)

    return NumericResult(valid=True, value=parsed)
