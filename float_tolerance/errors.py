class FloatToleranceError(Exception):
    """Base class for errors raised by float_tolerance."""

    pass


class InvalidArgumentError(FloatToleranceError, ValueError):
    """Raised when an argument has the right type but a meaningless value."""

    pass
