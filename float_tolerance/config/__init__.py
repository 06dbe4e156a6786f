from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from yaml import MappingNode, ScalarNode
from yaml.loader import SafeLoader

from float_tolerance import floats
from float_tolerance.logs.structlog import logger


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class EnvVarLoader(SafeLoader):
    """YAML loader that supports environment variable interpolation."""

    def __init__(self, stream: str | bytes) -> None:
        super().__init__(stream)

    def construct_scalar(self, node: ScalarNode | MappingNode) -> str:
        value: str = super().construct_scalar(node)
        if isinstance(value, str):
            pattern: str = r"\$\{([^}^{]+)\}"
            for match in re.finditer(pattern, value):
                env_var: str = match.group(1)
                value = value.replace(f"${{{env_var}}}", os.environ.get(env_var, ""))
        return value


@beartype
def load_from_yaml(path: str | Path) -> dict[str, object]:
    """
    Load a YAML config file with environment variable interpolation.

    Raises:
        ConfigError: If the file does not exist or YAML is invalid.
    """
    config_path: Path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data: dict[str, object] = yaml.load(f, Loader=EnvVarLoader)
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping (dict).")
        return data
    except yaml.YAMLError as err:
        raise ConfigError(f"YAML parsing error: {err}") from err


@beartype
class ToleranceConfig(BaseModel):
    """Tolerances to bind once and reuse across comparisons."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    abs_tol: float = Field(default=floats.ABSOLUTE_TOLERANCE, ge=0)
    rel_tol: float = Field(default=floats.DEFAULT_TOLERANCE, ge=0)
    epsilon_multiplier: int = Field(default=floats.EPSILON_MULTIPLIER, ge=0)

    def default_tolerance(self) -> float:
        return floats.default_tolerance(self.epsilon_multiplier)

    def approx_equal(self, a: float, b: float) -> bool:
        """Compare with the epsilon-derived tolerance."""
        return floats.approx_equal(a, b, self.default_tolerance())

    def approx_equal_combined(self, a: float, b: float) -> bool:
        return floats.approx_equal_combined(a, b, rel_tol=self.rel_tol, abs_tol=self.abs_tol)


@beartype
def load_tolerance_config(path: str | Path) -> ToleranceConfig:
    """
    Load the `tolerance` section of a YAML config file.

    A file without a `tolerance` key yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or the section is invalid.
    """
    data = load_from_yaml(path)
    section = data.get("tolerance")
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError("'tolerance' section must be a mapping (dict).")
    try:
        config = ToleranceConfig.model_validate(section)
    except ValidationError as err:
        raise ConfigError(f"Invalid tolerance config: {err}") from err
    logger.debug("Tolerance config loaded", path=str(path), **config.model_dump())
    return config
