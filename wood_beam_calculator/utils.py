"""Utility functions for the wood beam calculator."""

import math
import numbers
import sys
from typing import Optional

# Largest finite float, used in place of overflowed results
FLOAT_MAX = sys.float_info.max


class InvalidInputError(ValueError):
    """Raised when geometry, load or material values cannot be analysed."""


def require_finite(name: str, value: float) -> float:
    """Return value as float, rejecting NaN, infinity and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return number


def require_positive(name: str, value: float) -> float:
    """Finite and strictly greater than zero."""
    number = require_finite(name, value)
    if number <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value!r}")
    return number


def require_non_negative(name: str, value: float) -> float:
    number = require_finite(name, value)
    if number < 0:
        raise InvalidInputError(f"{name} must not be negative, got {value!r}")
    return number


def capped_ratio(numerator: float, denominator: float) -> float:
    """
    numerator / denominator for non-negative operands, never above FLOAT_MAX.
    A zero numerator gives 0; a vanishing denominator gives FLOAT_MAX.
    """
    if numerator == 0:
        return 0.0
    if denominator <= 0:
        return FLOAT_MAX
    return min(numerator / denominator, FLOAT_MAX)


def cap_finite(value: float) -> float:
    return min(value, FLOAT_MAX)


def format_safety_factor(safety_factor: float) -> str:
    """Safety factor to two decimals, or the infinity sign when unloaded."""
    if math.isinf(safety_factor):
        return "∞"
    return f"{safety_factor:.2f}"


def format_util(util: float, passed: Optional[bool] = None) -> str:
    """Format utilisation as percentage string with pass/fail indicator.
    When given, passed decides the indicator instead of the 100% line."""
    if passed is None:
        passed = util <= 100.0
    status = "OK" if passed else "FAIL"
    return f"{util:.0f}% [{status}]"


def print_results_table(results: list) -> None:
    """Print design check results as a formatted table."""
    print(f"\n{'Check':<18} {'Demand':>12} {'Capacity':>12} {'Util':>8} {'Status':>6}")
    print("-" * 62)
    for r in results:
        status = "OK" if r.passed else "FAIL"
        print(
            f"{r.name:<18} "
            f"{r.demand:>8.2f} {r.unit:<3} "
            f"{r.capacity:>8.2f} {r.unit:<3} "
            f"{r.utilisation:>6.0f}% "
            f"{status:>6}"
        )
    print()
