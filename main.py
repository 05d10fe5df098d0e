#!/bin/python
"""
Unified entry point for picking the highest-calorie set of foods that fits a weight limit.

Loads a '^'-delimited food database, optionally narrows it by calorie range
and size, runs the chosen exact solver and prints the resulting selection.
"""
import argparse
import math
import sys

from Core.utils import float_range_type, setup_logging
from MaxCalorie import (
    CatalogFormatError,
    PreconditionViolation,
    ResourceExhaustion,
    SolverConfig,
    filter_catalog,
    load_food_database,
    print_food_vector,
)
from MaxCalorie.solvers import list_solvers, solve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Choose foods that maximize calories within a weight capacity."
    )

    parser.add_argument(
        "--database",
        "-d",
        required=True,
        help="Path to the '^'-delimited food database"
    )
    parser.add_argument(
        "--capacity",
        "-c",
        type=float,
        required=True,
        help="Maximum total weight, in ounces"
    )
    parser.add_argument(
        "--solver",
        "-s",
        default="dynamic",
        choices=list_solvers(),
        help="Solver to use (default: dynamic)"
    )

    # Filtering ahead of the solver
    parser.add_argument(
        "--calories",
        type=float_range_type("calories"),
        default=None,
        help="Inclusive calorie range to keep, e.g. '100-500' or '1:' (default: no filter)"
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=int,
        default=None,
        help="Keep at most this many matching items (default: all)"
    )

    parser.add_argument(
        "--weight-unit",
        type=float,
        default=1.0,
        help="Discretization unit in ounces for the dynamic solver (default: 1.0)"
    )
    parser.add_argument(
        "--log-dir",
        default="logs",
        help="Directory for the run log (default: logs)"
    )
    return parser


def main(argv=None) -> int:
    """Parse command line arguments and run the selected solver."""
    args = build_parser().parse_args(argv)
    logger = setup_logging("maxcalorie", args.solver, log_dir=args.log_dir)

    try:
        config = SolverConfig(weight_unit=args.weight_unit)
        foods = load_food_database(args.database)
        if args.calories is not None or args.limit is not None:
            low, high = args.calories if args.calories is not None else (-math.inf, math.inf)
            limit = args.limit if args.limit is not None else max(1, len(foods))
            foods = filter_catalog(foods, low, high, limit)
            logger.info("filtered catalog to %d items", len(foods))
        selection = solve(args.solver, foods, args.capacity, config=config)
    except (CatalogFormatError, PreconditionViolation, ResourceExhaustion) as exc:
        logger.error("%s", exc)
        return 1
    except ValueError as exc:
        logger.error("invalid argument: %s", exc)
        return 1

    print_food_vector(selection)
    return 0

if __name__ == "__main__":
    sys.exit(main())
