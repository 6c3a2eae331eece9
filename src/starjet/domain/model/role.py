"""Roles supplied by the auth/session collaborator."""

from __future__ import annotations

from enum import Enum


class Role(Enum):
    ADMIN = "admin"
    SALESMAN = "salesman"
    ACCOUNTANT = "accountant"

    @property
    def can_delete(self) -> bool:
        return self is Role.ADMIN
