"""Sample generation driven by an integer counter.

Adding `step` to a running total accumulates one rounding error per addition.
Multiplying an exact integer index by `step` costs a single rounding, so every
sample is independent of the ones computed before it.
"""

from collections.abc import Iterator

from beartype import beartype

from float_tolerance.errors import InvalidArgumentError
from float_tolerance.logs.structlog import logger


@beartype
def lin_space_by_index(index: int, step: float) -> float:
    """Return the sample at `index`, computed as index * step."""
    return index * step


@beartype
def iter_samples(count: int, step: float, start: int = 0) -> Iterator[float]:
    """
    Yield `count` samples for indices start, start + 1, ..., start + count - 1.

    Raises:
        InvalidArgumentError: If count is negative.
    """
    if count < 0:
        logger.warning("Rejected sample count", value=count)
        raise InvalidArgumentError(f"count must be non-negative, got {count}")
    return (lin_space_by_index(i, step) for i in range(start, start + count))


@beartype
def samples(count: int, step: float, start: int = 0) -> list[float]:
    """List form of `iter_samples`."""
    return list(iter_samples(count, step, start))


@beartype
def accumulated_samples(count: int, step: float) -> list[float]:
    """Running-sum rendition of `samples(count, step)`, kept for comparison."""
    if count < 0:
        logger.warning("Rejected sample count", value=count)
        raise InvalidArgumentError(f"count must be non-negative, got {count}")
    result: list[float] = []
    total = 0.0
    for _ in range(count):
        result.append(total)
        total += step
    return result


@beartype
def max_drift(count: int, step: float) -> float:
    """Largest absolute gap between accumulated and index-driven samples."""
    indexed = samples(count, step)
    accumulated = accumulated_samples(count, step)
    return max((abs(x - y) for x, y in zip(accumulated, indexed)), default=0.0)
