import math
import sys
from typing import Final

from beartype import beartype

from float_tolerance.errors import InvalidArgumentError
from float_tolerance.logs.structlog import logger

MACHINE_EPSILON: Final[float] = sys.float_info.epsilon
EPSILON_MULTIPLIER: Final[int] = 10
DEFAULT_TOLERANCE: Final[float] = EPSILON_MULTIPLIER * MACHINE_EPSILON

# Fixed absolute tolerance, independent of the magnitude of the operands
ABSOLUTE_TOLERANCE: Final[float] = 1e-10


@beartype
def _check_tolerance(tol: float, name: str = "tol") -> float:
    if math.isnan(tol) or tol < 0:
        logger.warning("Rejected tolerance", name=name, value=tol)
        raise InvalidArgumentError(f"{name} must be a non-negative number, got {tol}")
    return tol


@beartype
def machine_epsilon() -> float:
    """Smallest float64 value such that 1.0 + eps != 1.0."""
    return MACHINE_EPSILON


@beartype
def default_tolerance(multiplier: int = EPSILON_MULTIPLIER) -> float:
    """Derive a tolerance as a multiple of the float64 machine epsilon."""
    if multiplier < 0:
        logger.warning("Rejected epsilon multiplier", value=multiplier)
        raise InvalidArgumentError(f"multiplier must be non-negative, got {multiplier}")
    return multiplier * MACHINE_EPSILON


@beartype
def approx_equal(a: float, b: float, tol: float | None = None) -> bool:
    """
    Compare two floats with an absolute tolerance.

    Returns True iff abs(a - b) < tol. A tolerance of zero degrades to exact
    equality of finite values. NaN operands never compare equal, and neither do two infinities,
    since inf - inf is NaN; use `approx_equal_inf` when that matters.

    Args:
        a: First value.
        b: Second value.
        tol: Non-negative tolerance. Defaults to DEFAULT_TOLERANCE.

    Raises:
        InvalidArgumentError: If tol is negative or NaN.
    """
    if tol is None:
        tol = DEFAULT_TOLERANCE
    _check_tolerance(tol)
    if tol == 0:
        return a == b and math.isfinite(a)
    return abs(a - b) < tol


@beartype
def float_is_zero(a: float, tol: float | None = None) -> bool:
    """Check if a float is effectively zero with explicit tolerance."""
    return approx_equal(a, 0.0, tol)


@beartype
def approx_equal_inf(a: float, b: float, tol: float | None = None) -> bool:
    """Like `approx_equal`, but equal infinities of the same sign compare equal."""
    if math.isinf(a) and math.isinf(b):
        if tol is not None:
            _check_tolerance(tol)
        return a == b
    return approx_equal(a, b, tol)


@beartype
def approx_equal_combined(
    a: float,
    b: float,
    rel_tol: float | None = None,
    abs_tol: float | None = None,
) -> bool:
    """
    Compare two floats with a combined relative and absolute tolerance.

    The effective tolerance is max(rel_tol * max(|a|, |b|), abs_tol), so the
    relative term governs large magnitudes and the absolute term values near zero.
    """
    if rel_tol is None:
        rel_tol = DEFAULT_TOLERANCE
    if abs_tol is None:
        abs_tol = ABSOLUTE_TOLERANCE
    _check_tolerance(rel_tol, "rel_tol")
    _check_tolerance(abs_tol, "abs_tol")
    tol = max(rel_tol * max(abs(a), abs(b)), abs_tol)
    if tol == 0:
        return a == b and math.isfinite(a)
    return abs(a - b) < tol
