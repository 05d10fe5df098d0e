"""Max-calorie food selection: catalog handling and exact knapsack solvers."""

from .config import MAX_ENUMERATION_ITEMS, SolverConfig
from .errors import CatalogFormatError, PreconditionViolation, ResourceExhaustion
from .food import FoodCatalog, FoodItem, Selection
from .problem import MaxCalorieProblem
from .catalog import (
    filter_catalog,
    format_food_vector,
    load_food_database,
    print_food_vector,
    sum_food_vector,
)
from .solvers import dynamic_max_calories, exhaustive_max_calories, solve

__version__ = "0.1.0"
__all__ = [
    "MAX_ENUMERATION_ITEMS",
    "SolverConfig",
    "CatalogFormatError",
    "PreconditionViolation",
    "ResourceExhaustion",
    "FoodCatalog",
    "FoodItem",
    "Selection",
    "MaxCalorieProblem",
    "filter_catalog",
    "format_food_vector",
    "load_food_database",
    "print_food_vector",
    "sum_food_vector",
    "dynamic_max_calories",
    "exhaustive_max_calories",
    "solve",
    "__version__",
]
