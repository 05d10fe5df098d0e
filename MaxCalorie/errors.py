"""Exceptions raised by the max-calorie solvers and the catalog loader."""


class PreconditionViolation(ValueError):
    """Caller misuse: catalog too large to enumerate, negative capacity, bad discretization unit."""


class ResourceExhaustion(MemoryError):
    """The working storage a solver needs (the DP table) cannot be allocated."""


class CatalogFormatError(ValueError):
    """Raised when a food database file cannot be read or violates the row schema."""
