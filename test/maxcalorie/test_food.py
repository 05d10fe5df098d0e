import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from MaxCalorie.food import FoodItem, Selection
from MaxCalorie.problem import MaxCalorieProblem, capacity_units, weight_units


@pytest.mark.parametrize(
    "description, weight",
    [("", 1.0), ("apple", 0.0), ("apple", -2.0)],
)
def test_food_item_rejects_invalid_fields(description, weight):
    with pytest.raises(ValueError):
        FoodItem(description, weight, 10.0)


def test_food_item_is_immutable():
    food = FoodItem("apple", 4.0, 95.0)
    with pytest.raises(FrozenInstanceError):
        food.calories = 0.0


def test_selection_totals_and_membership():
    a = FoodItem("a", 1.5, 10.0)
    b = FoodItem("b", 2.0, 5.0)
    selection = Selection.of([a, b])
    assert len(selection) == 2
    assert selection.total_weight == pytest.approx(3.5)
    assert selection.total_calories == pytest.approx(15.0)
    assert a in selection
    # membership is by identity with catalog items
    assert FoodItem("a", 1.5, 10.0) not in selection


@pytest.mark.parametrize(
    "capacity, unit, expected",
    [
        (5, 1.0, 5),
        (5.9, 1.0, 5),
        (3.2, 0.5, 6),
        (0, 1.0, 0),
        (3.0000000001, 1.0, 3),
        (2.9999999995, 1.0, 2),
        (0.3, 0.1, 2),
    ],
)
def test_capacity_units_truncate(capacity, unit, expected):
    units = capacity_units(capacity, unit)
    assert units == expected
    assert units * unit <= capacity


@pytest.mark.parametrize(
    "weight, unit, expected",
    [
        (2, 1.0, 2),
        (2.0000000001, 1.0, 3),
        (1.5, 1.0, 2),
        (0.4, 0.5, 1),
        (1e-6, 1.0, 1),
        (0.3, 0.1, 3),
    ],
)
def test_weight_units_round_up(weight, unit, expected):
    units = weight_units(weight, unit)
    assert units == expected
    assert units * unit >= weight


def test_problem_fitness_penalizes_overflow(abcd_catalog):
    problem = MaxCalorieProblem(abcd_catalog, 5)
    feasible = problem.solution_from_indices([0, 1])
    assert problem.evaluate(feasible) == pytest.approx(-7.0)
    assert problem.is_feasible(feasible)

    overfull = problem.solution_from_indices([2, 3])
    assert not problem.is_feasible(overfull)
    assert problem.evaluate(overfull) > problem.evaluate(feasible)


def test_problem_info_reports_discretization(abcd_catalog):
    info = MaxCalorieProblem(abcd_catalog, 7.5).get_problem_info()
    assert info["dimension"] == 4
    assert info["capacity_units"] == 7
    assert info["weight_unit"] == 1.0
