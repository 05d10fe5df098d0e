"""
Max-calorie solvers.

- ExhaustiveSolver: enumerates every subset of a small catalog.
- DynamicSolver: 0/1 knapsack table fill plus traceback.
"""

from .exhaustive import ExhaustiveSolver, exhaustive_max_calories
from .dynamic import DynamicSolver, dynamic_max_calories
from .registry import get_solver, list_solvers, register_solver, solve

__all__ = [
    "ExhaustiveSolver",
    "DynamicSolver",
    "exhaustive_max_calories",
    "dynamic_max_calories",
    "get_solver",
    "list_solvers",
    "register_solver",
    "solve",
]
