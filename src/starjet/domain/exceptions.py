"""Domain-level exceptions.

Only the sale flows raise these. The calculation engine itself reports
problems through result objects (``NumericResult``, ``RowTotal``,
``ValidationReport``) and never raises across its boundary.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PermissionDeniedError(DomainException):
    """The current role is not allowed to perform the operation."""
