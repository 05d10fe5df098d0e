"""
Shared utilities for CLI parsing and logging configuration.
"""

from typing import Callable, Optional, Tuple
import argparse
import logging
import math
import re
import time
from pathlib import Path

FloatRange = Tuple[float, float]


def parse_float_range(spec: str, *, label: str) -> FloatRange:
    """Parse an inclusive float range such as '100-500', '100:' or ':500'.

    A single value yields a degenerate range; an empty side is open-ended.
    """
    raw = (spec or "").strip()
    if not raw:
        raise ValueError(f"{label} cannot be empty")
    parts = [p.strip() for p in re.split(r"[,:]|(?<=\d)-", raw)]
    def _coerce(value: str, default: float) -> float:
        if not value:
            return default
        try:
            return float(value)
        except ValueError as exc:
            raise ValueError(f"{label} must contain numbers: {spec!r}") from exc
    if len(parts) == 1:
        val = _coerce(parts[0], math.nan)
        return (val, val)
    if len(parts) != 2 or not any(parts):
        raise ValueError(f"Invalid {label} value: {spec!r}")
    lo, hi = _coerce(parts[0], -math.inf), _coerce(parts[1], math.inf)
    if lo > hi:
        lo, hi = hi, lo
    return (lo, hi)


def float_range_type(label: str) -> Callable[[str], FloatRange]:
    def _parser(text: str) -> FloatRange:
        try:
            return parse_float_range(text, label=label)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc))
    return _parser


def setup_logging(
    log_type: str,
    problem_name: str,
    log_dir: Optional[str] = 'logs',
    level: int = logging.INFO,
) -> logging.Logger:
    """Sets up the root logger for a command line run.

    Records go to stderr and, when `log_dir` is given, are appended to
    `<log_dir>/<log_type>_logs.log`. Library modules log through
    `logging.getLogger(__name__)` and inherit these handlers.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Replace handlers from an earlier call instead of stacking them
    for handler in [h for h in logger.handlers if getattr(h, "_maxcal_handler", False)]:
        logger.removeHandler(handler)
        handler.close()

    session_id = int(time.time())
    formatter = logging.Formatter(
        f'%(asctime)s - %(levelname)s - [Session: {session_id}]-[Problem: {problem_name}] - %(name)s - %(message)s'
    )
    handlers: list = [logging.StreamHandler()]
    if log_dir:
        log_dir_path = Path(log_dir)
        log_dir_path.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir_path / f"{log_type}_logs.log", mode='a'))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._maxcal_handler = True
        logger.addHandler(handler)

    return logging.getLogger(f"{log_type}.{problem_name}")
