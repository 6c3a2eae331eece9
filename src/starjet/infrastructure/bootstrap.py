"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from starjet.domain.service.rate_limiter import FixedWindowRateLimiter
from starjet.domain.service.submission_guard import SubmissionGuard
from starjet.infrastructure.persistence.json_sale_repository import (
    JsonSaleRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get("STARJET_DATA_DIR")
    return Path(override) if override else _DEFAULT_DATA_DIR


def sale_repository() -> JsonSaleRepository:
    return JsonSaleRepository(data_dir() / "sales.json")


def submission_guard() -> SubmissionGuard:
    return SubmissionGuard(limiter=FixedWindowRateLimiter())
