from float_tolerance import floats, sampling
from float_tolerance.errors import FloatToleranceError, InvalidArgumentError
from float_tolerance.floats import (
    ABSOLUTE_TOLERANCE,
    DEFAULT_TOLERANCE,
    MACHINE_EPSILON,
    approx_equal,
    approx_equal_combined,
    approx_equal_inf,
    default_tolerance,
    float_is_zero,
    machine_epsilon,
)
from float_tolerance.sampling import iter_samples, lin_space_by_index, samples

__all__ = [
    "floats",
    "sampling",
    "FloatToleranceError",
    "InvalidArgumentError",
    "ABSOLUTE_TOLERANCE",
    "DEFAULT_TOLERANCE",
    "MACHINE_EPSILON",
    "approx_equal",
    "approx_equal_combined",
    "approx_equal_inf",
    "default_tolerance",
    "float_is_zero",
    "machine_epsilon",
    "iter_samples",
    "lin_space_by_index",
    "samples",
]
