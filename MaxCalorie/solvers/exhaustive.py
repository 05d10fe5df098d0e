"""Exhaustive subset enumeration for the max-calorie problem."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from Core.search_algorithm import SearchAlgorithm

from ..config import SolverConfig
from ..errors import PreconditionViolation
from ..food import FoodCatalog, Selection
from ..problem import MaxCalorieProblem

logger = logging.getLogger(__name__)


class ExhaustiveSolver(SearchAlgorithm):
    """Examines all 2^n subsets; bit j of a mask means item j is included.

    Each `step()` evaluates one ascending chunk of masks. The running best
    starts as the empty subset and is replaced only on strictly more
    calories, so the lowest mask wins ties.
    """
    name = "exhaustive"

    def __init__(self, problem: MaxCalorieProblem, **kwargs):
        limit = problem.config.enumeration_limit
        if problem.size >= limit:
            raise PreconditionViolation(
                f"exhaustive search needs fewer than {limit} items, got {problem.size}; filter the catalog first"
            )
        super().__init__(problem, **kwargs)
        self.chunk_size = int(kwargs.get("chunk_size", problem.config.enumeration_chunk))
        self.total_masks = 1 << problem.size
        self._shifts = np.arange(problem.size, dtype=np.uint64)
        self._next_mask = 0
        self._best_mask = 0
        self._best_calories = 0.0

    def initialize(self):
        super().initialize()
        self._next_mask = 0
        self._best_mask = 0
        self._best_calories = 0.0

    def is_finished(self) -> bool:
        return self._next_mask >= self.total_masks

    def step(self):
        if self.is_finished():
            return
        start = self._next_mask
        stop = min(start + self.chunk_size, self.total_masks)
        masks = np.arange(start, stop, dtype=np.uint64)
        bits = ((masks[:, None] >> self._shifts[None, :]) & np.uint64(1)).astype(float)
        total_weight = bits @ self.problem.weights
        total_calories = bits @ self.problem.calories

        feasible = total_weight <= self.problem.capacity
        if np.any(feasible):
            candidates = np.where(feasible, total_calories, -np.inf)
            # argmax returns the first maximum, i.e. the lowest mask in the chunk
            pos = int(np.argmax(candidates))
            if candidates[pos] > self._best_calories:
                self._best_calories = float(candidates[pos])
                self._best_mask = start + pos
                self.best_solution = self._mask_to_solution(self._best_mask)
                self.best_solution.evaluate()

        self._next_mask = stop
        self.iteration += 1
        logger.debug(
            "exhaustive chunk %d: masks [%d, %d) best calories %.3f",
            self.iteration, start, stop, self._best_calories,
        )

    def _mask_to_solution(self, mask: int):
        indices = [j for j in range(self.problem.size) if (mask >> j) & 1]
        return self.problem.solution_from_indices(indices)


def exhaustive_max_calories(
    foods: FoodCatalog,
    total_weight: float,
    config: Optional[SolverConfig] = None,
) -> Selection:
    """Optimal subset of `foods` whose weight fits in `total_weight`, by brute force.

    Raises PreconditionViolation for negative capacity or a catalog with
    `config.enumeration_limit` items or more.
    """
    problem = MaxCalorieProblem(foods, total_weight, config=config)
    solver = ExhaustiveSolver(problem)
    best = solver.run()
    selection = problem.to_selection(best)
    logger.info(
        "exhaustive search over %d items (%d subsets): %d selected, %.2f calories",
        problem.size, solver.total_masks, len(selection), selection.total_calories,
    )
    return selection
