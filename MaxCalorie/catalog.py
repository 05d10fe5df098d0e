"""
Catalog I/O and shaping helpers around the solvers.

Database format: UTF-8 text, one food per line, fields separated by '^':

    description^weight_ounces^calories

The first line is a header row and is skipped.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .errors import CatalogFormatError
from .food import FoodCatalog, FoodItem

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "^"
FIELD_COUNT = 3


def load_food_database(path: Union[str, Path]) -> List[FoodItem]:
    """Load all the valid food items from a database file.

    Rows with unparsable numbers, an empty description or a non-positive
    weight are skipped. A row with the wrong number of fields aborts the load.
    """
    path = Path(path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise CatalogFormatError(f"cannot open food database {path}: {exc}") from exc

    foods: List[FoodItem] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 or not line.strip():
            continue
        fields = line.split(FIELD_DELIMITER)
        if len(fields) != FIELD_COUNT:
            raise CatalogFormatError(
                f"{path}:{line_number}: invalid field count; want {FIELD_COUNT} but got {len(fields)}: {line!r}"
            )
        description, weight_field, calories_field = fields
        food = _parse_food(description, weight_field, calories_field)
        if food is None:
            skipped += 1
            logger.warning("%s:%d: skipping invalid food record %r", path, line_number, line)
            continue
        foods.append(food)

    logger.info("loaded %d food items from %s (%d skipped)", len(foods), path, skipped)
    return foods


def _parse_food(description: str, weight_field: str, calories_field: str) -> Optional[FoodItem]:
    try:
        weight = float(weight_field)
        calories = float(calories_field)
    except ValueError:
        return None
    if not (math.isfinite(weight) and math.isfinite(calories)):
        return None
    try:
        return FoodItem(description=description, weight=weight, calories=calories)
    except ValueError:
        return None


def filter_catalog(
    source: FoodCatalog,
    min_calories: float,
    max_calories: float,
    total_size: int,
) -> List[FoodItem]:
    """Return the first `total_size` items whose calories lie in [min_calories, max_calories].

    Used ahead of the exhaustive solver to drop irrelevant (e.g. zero-calorie)
    items and keep the enumeration small. Source order is preserved.
    """
    if total_size <= 0:
        raise ValueError(f"total_size must be positive, got {total_size}")

    filtered: List[FoodItem] = []
    for food in source:
        if min_calories <= food.calories <= max_calories:
            if len(filtered) >= total_size:
                break
            filtered.append(food)
    logger.debug(
        "filtered %d -> %d items (calories in [%s, %s], cap %d)",
        len(source), len(filtered), min_calories, max_calories, total_size,
    )
    return filtered


def sum_food_vector(foods: Iterable[FoodItem]) -> Tuple[float, float]:
    """Total (weight, calories) of `foods`."""
    total_weight = total_calories = 0.0
    for food in foods:
        total_weight += food.weight
        total_calories += food.calories
    return total_weight, total_calories


def format_food_vector(foods: Iterable[FoodItem]) -> str:
    foods = list(foods)
    lines = ["*** food Vector ***"]
    if not foods:
        lines.append("[empty food list]")
        return "\n".join(lines)

    for food in foods:
        lines.append(
            f"Ye olde {food.description} ==> Weight of {food.weight:g} ounces; calories = {food.calories:g}"
        )
    total_weight, total_calories = sum_food_vector(foods)
    lines.append(f"> Grand total weight: {total_weight:g} ounces")
    lines.append(f"> Grand total calories: {total_calories:g}")
    return "\n".join(lines)


def print_food_vector(foods: Iterable[FoodItem]) -> None:
    print(format_food_vector(foods))
