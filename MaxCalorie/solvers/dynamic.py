"""Dynamic-programming solver with table traceback for the max-calorie problem."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np

from Core.problem import Solution
from Core.search_algorithm import SearchAlgorithm

from ..config import SolverConfig
from ..errors import ResourceExhaustion
from ..food import FoodCatalog, Selection
from ..problem import MaxCalorieProblem

logger = logging.getLogger(__name__)


class DynamicSolver(SearchAlgorithm):
    """Classic 0/1 knapsack table over discretized weights.

    `table[i][w]` is the best calorie total using only the first `i` items
    with a budget of `w` units. Each `step()` fills one row; once the last
    row is filled the chosen items are recovered by walking the table
    backward from `(n, capacity)`.
    """
    name = "dynamic"

    def __init__(self, problem: MaxCalorieProblem, **kwargs):
        if not math.isfinite(problem.capacity):
            raise ResourceExhaustion(f"capacity {problem.capacity!r} cannot bound a DP table")
        super().__init__(problem, **kwargs)
        self.capacity = problem.capacity_units()
        self.item_units: List[int] = problem.weight_units()
        self.table: Optional[np.ndarray] = None
        self.selected: List[int] = []
        self._finished = False

    def initialize(self):
        super().initialize()
        self.table = self._allocate_table()
        self.selected = []
        self._finished = False

    def is_finished(self) -> bool:
        return self._finished

    def step(self):
        if self._finished:
            return
        if self.table is None:
            self.initialize()
        i = self.iteration + 1
        if i > self.problem.size:
            self._traceback()
            return

        T = self.table
        units = self.item_units[i - 1]
        calories = self.problem.calories[i - 1]
        # Budgets below the item's weight cannot hold it.
        T[i] = T[i - 1]
        if units <= self.capacity:
            include = calories + T[i - 1, : self.capacity + 1 - units]
            T[i, units:] = np.maximum(T[i - 1, units:], include)
        self.iteration = i

    @property
    def optimum(self) -> float:
        if self.table is None:
            raise RuntimeError("table has not been built")
        return float(self.table[self.problem.size, self.capacity])

    def _traceback(self) -> None:
        T = self.table
        w = self.capacity
        selected: List[int] = []
        for i in range(self.problem.size, 0, -1):
            if T[i, w] != T[i - 1, w]:
                selected.append(i - 1)
                w -= self.item_units[i - 1]
        self.selected = selected
        solution: Solution = self.problem.solution_from_indices(selected)
        solution.evaluate()
        self.best_solution = solution
        self._finished = True
        logger.debug("traceback picked %d items, %d units left", len(selected), w)

    def _allocate_table(self) -> np.ndarray:
        rows = self.problem.size + 1
        cols = self.capacity + 1
        limit = self.problem.config.max_table_cells
        if rows * cols > limit:
            raise ResourceExhaustion(
                f"DP table of {rows} x {cols} cells exceeds the configured limit of {limit}; "
                "raise weight_unit or reduce the catalog"
            )
        try:
            return np.zeros((rows, cols), dtype=float)
        except (MemoryError, ValueError) as exc:
            raise ResourceExhaustion(f"cannot allocate DP table of {rows} x {cols} cells") from exc


def dynamic_max_calories(
    foods: FoodCatalog,
    total_weight: float,
    config: Optional[SolverConfig] = None,
) -> Selection:
    """Optimal subset of `foods` within `total_weight`, by dynamic programming.

    Items are listed in traceback order (last catalog index first).
    """
    problem = MaxCalorieProblem(foods, total_weight, config=config)
    solver = DynamicSolver(problem)
    best = solver.run()
    selection = problem.to_selection(best, order=solver.selected)
    logger.info(
        "dynamic programming over %d items x %d units: %d selected, %.2f calories",
        problem.size, solver.capacity + 1, len(selection), solver.optimum,
    )
    return selection
