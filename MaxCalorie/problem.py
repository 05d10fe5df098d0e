from __future__ import annotations

import math
from typing import Iterable, List, Optional

import numpy as np

from Core.problem import ProblemInterface, Solution

from .config import DEFAULT_CONFIG, SolverConfig
from .errors import PreconditionViolation
from .food import FoodCatalog, FoodItem, Selection


def capacity_units(capacity: float, unit: float) -> int:
    """Whole discretization units available in `capacity` (truncated, so units * unit <= capacity)."""
    capacity = float(capacity)
    units = int(math.floor(capacity / unit))
    # The quotient may round up across an integer.
    while units > 0 and units * unit > capacity:
        units -= 1
    return max(units, 0)


def weight_units(weight: float, unit: float) -> int:
    """Whole discretization units an item occupies (rounded up, so units * unit >= weight)."""
    weight = float(weight)
    units = int(math.ceil(weight / unit))
    # The quotient may round down across an integer.
    while units * unit < weight:
        units += 1
    return max(units, 1) if weight > 0 else max(units, 0)


class MaxCalorieProblem(ProblemInterface):
    """0/1 max-calorie knapsack posed as a minimization task (maximize calories, penalize overflow)."""

    def __init__(
        self,
        foods: FoodCatalog,
        capacity: float,
        *,
        config: Optional[SolverConfig] = None,
        penalty_factor: Optional[float] = None,
    ) -> None:
        capacity = float(capacity)
        if not capacity >= 0:
            raise PreconditionViolation(f"capacity must be non-negative, got {capacity!r}")

        self.foods: List[FoodItem] = list(foods)
        self.capacity = capacity
        self.config = config or DEFAULT_CONFIG
        self.weights = np.asarray([food.weight for food in self.foods], dtype=float)
        self.calories = np.asarray([food.calories for food in self.foods], dtype=float)
        base_penalty = float(np.max(np.abs(self.calories))) if self.calories.size else 1.0
        self.penalty_factor = float(penalty_factor) if penalty_factor is not None else max(1.0, 2.0 * base_penalty)

    @property
    def size(self) -> int:
        return len(self.foods)

    # ---- ProblemInterface API ----
    def evaluate(self, solution: Solution) -> float:
        mask = self._to_vector(solution.representation)
        total_calories = float(np.dot(self.calories, mask))
        total_weight = float(np.dot(self.weights, mask))
        overflow = max(0.0, total_weight - self.capacity)
        fitness = -total_calories + self.penalty_factor * overflow
        solution.fitness = fitness
        return fitness

    def get_initial_solution(self) -> Solution:
        return Solution([0] * self.size, self)

    def get_problem_info(self) -> dict:
        return {
            "dimension": self.size,
            "problem_type": "binary",
            "capacity": float(self.capacity),
            "weight_unit": float(self.config.weight_unit),
            "capacity_units": self.capacity_units() if math.isfinite(self.capacity) else None,
            "weights": self.weights.copy(),
            "calories": self.calories.copy(),
            "penalty_factor": float(self.penalty_factor),
        }

    # ---- Domain helpers ----
    def capacity_units(self) -> int:
        return capacity_units(self.capacity, self.config.weight_unit)

    def weight_units(self) -> List[int]:
        return [weight_units(food.weight, self.config.weight_unit) for food in self.foods]

    def is_feasible(self, solution: Solution) -> bool:
        mask = self._to_vector(solution.representation)
        return float(np.dot(self.weights, mask)) <= self.capacity

    def solution_from_indices(self, indices: Iterable[int]) -> Solution:
        mask = [0] * self.size
        for idx in indices:
            mask[idx] = 1
        return Solution(mask, self)

    def to_selection(self, solution: Solution, order: Optional[Iterable[int]] = None) -> Selection:
        """Map a mask back onto the catalog's own item objects.

        `order` lists the selected indices in the order the items should
        appear; by default they follow catalog order.
        """
        indices = list(order) if order is not None else solution.selected_indices()
        return Selection.of(self.foods[idx] for idx in indices)

    # ---- internal helpers ----
    def _to_vector(self, rep: Iterable) -> np.ndarray:
        arr = np.asarray(list(rep), dtype=float)
        if arr.size != self.size:
            raise ValueError("representation length mismatch with problem dimension")
        return np.clip(arr, 0.0, 1.0)
