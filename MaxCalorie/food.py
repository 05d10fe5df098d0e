"""
Food items and selections.

A catalog is any ordered sequence of `FoodItem`; a `Selection` is the
subset a solver returns. Items are shared by reference between the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple


@dataclass(frozen=True)
class FoodItem:
    """One food item available for purchase.

    Attributes
    ----------
    description : str
        Human-readable description, e.g. "spicy chicken breast". Non-empty.
    weight : float
        Weight in ounces. Strictly positive.
    calories : float
        Calories. Expected to be non-negative, not enforced.
    """
    description: str
    weight: float
    calories: float

    def __post_init__(self) -> None:
        if not self.description:
            raise ValueError("FoodItem.description must be non-empty")
        if not self.weight > 0:
            raise ValueError(f"FoodItem[{self.description}] weight must be > 0, got {self.weight!r}")


FoodCatalog = Sequence[FoodItem]


@dataclass(frozen=True)
class Selection:
    """Subset of a catalog chosen by a solver; each item appears at most once."""
    items: Tuple[FoodItem, ...] = ()

    @classmethod
    def of(cls, items: Iterable[FoodItem]) -> "Selection":
        return cls(tuple(items))

    @property
    def total_weight(self) -> float:
        return float(sum(item.weight for item in self.items))

    @property
    def total_calories(self) -> float:
        return float(sum(item.calories for item in self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return any(item is chosen for chosen in self.items)
