"""Solver configuration knobs (pure data holder)."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import PreconditionViolation

# Subset masks are numpy uint64 values, so enumeration needs n < 64 items.
MAX_ENUMERATION_ITEMS = 64


@dataclass(frozen=True)
class SolverConfig:
    """
    Attributes
    ----------
    weight_unit : float
        Discretization unit (ounces per DP column). Capacity is floored to whole
        units, item weights are rounded up to whole units.
    enumeration_limit : int
        Exclusive upper bound on catalog size for the exhaustive solver.
    enumeration_chunk : int
        Number of subset masks evaluated per exhaustive `step()`.
    max_table_cells : int
        Largest DP table, in cells, the dynamic solver will allocate.
    """
    weight_unit: float = 1.0
    enumeration_limit: int = MAX_ENUMERATION_ITEMS
    enumeration_chunk: int = 1 << 14
    max_table_cells: int = 50_000_000

    def __post_init__(self) -> None:
        if not self.weight_unit > 0:
            raise PreconditionViolation(f"weight_unit must be positive, got {self.weight_unit!r}")
        if not 0 < self.enumeration_limit <= MAX_ENUMERATION_ITEMS:
            raise ValueError(f"enumeration_limit must be in (0, {MAX_ENUMERATION_ITEMS}]")
        if self.enumeration_chunk < 1:
            raise ValueError("enumeration_chunk must be >= 1")
        if self.max_table_cells < 1:
            raise ValueError("max_table_cells must be >= 1")


DEFAULT_CONFIG = SolverConfig()
