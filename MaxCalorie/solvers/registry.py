"""
Registry for looking up max-calorie solvers by name.
"""

import logging
from typing import Dict, List, Optional, Type

from Core.search_algorithm import SearchAlgorithm

from ..config import SolverConfig
from ..food import FoodCatalog, Selection
from ..problem import MaxCalorieProblem
from .dynamic import DynamicSolver
from .exhaustive import ExhaustiveSolver

logger = logging.getLogger(__name__)

_solver_registry: Dict[str, Type[SearchAlgorithm]] = {
    ExhaustiveSolver.name: ExhaustiveSolver,
    DynamicSolver.name: DynamicSolver,
}


def register_solver(cls: Type[SearchAlgorithm]) -> None:
    """Register (or override) a solver class under its `name`."""
    if not cls.name:
        raise ValueError(f"{cls.__name__} does not define a registry name")
    _solver_registry[cls.name] = cls


def list_solvers() -> List[str]:
    return sorted(_solver_registry)


def get_solver(name: str) -> Type[SearchAlgorithm]:
    try:
        return _solver_registry[name]
    except KeyError:
        raise KeyError(f"Solver '{name}' is not registered; choose from {list_solvers()}") from None


def solve(
    name: str,
    foods: FoodCatalog,
    capacity: float,
    config: Optional[SolverConfig] = None,
) -> Selection:
    """Run the named solver on `foods` and return its selection."""
    cls = get_solver(name)
    problem = MaxCalorieProblem(foods, capacity, config=config)
    solver = cls(problem)
    logger.info("running %s solver on %d items, capacity %.2f", name, problem.size, problem.capacity)
    best = solver.run()
    order = getattr(solver, "selected", None)
    selection = problem.to_selection(best, order=order or None)
    logger.info(
        "%s solver: %d items, weight %.2f, calories %.2f",
        name, len(selection), selection.total_weight, selection.total_calories,
    )
    return selection
