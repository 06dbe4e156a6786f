from float_tolerance.logs.structlog import configure, logger

__all__ = ["configure", "logger"]
