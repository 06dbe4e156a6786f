import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from float_tolerance.config import ConfigError, ToleranceConfig, load_tolerance_config
from float_tolerance.floats import ABSOLUTE_TOLERANCE, DEFAULT_TOLERANCE, MACHINE_EPSILON


def test_tolerance_config_defaults():
    config = ToleranceConfig()

    assert config.abs_tol == ABSOLUTE_TOLERANCE
    assert config.rel_tol == DEFAULT_TOLERANCE
    assert config.epsilon_multiplier == 10
    assert config.default_tolerance() == DEFAULT_TOLERANCE


def test_tolerance_config_strict_validation():
    with pytest.raises(ValidationError):
        ToleranceConfig(abs_tol=1e-6, extra_field="invalid")

    with pytest.raises(ValidationError):
        ToleranceConfig(abs_tol=-1.0)

    with pytest.raises(ValidationError):
        ToleranceConfig(epsilon_multiplier=-3)


def test_tolerance_config_is_frozen():
    config = ToleranceConfig()
    with pytest.raises(ValidationError):
        config.abs_tol = 1.0


def test_tolerance_config_binds_comparisons():
    config = ToleranceConfig(epsilon_multiplier=1000, abs_tol=1e-3)

    assert config.default_tolerance() == 1000 * MACHINE_EPSILON
    assert config.approx_equal(1.0, 1.0 + 1e-14)
    assert config.approx_equal(1.0, 1.0 + 1e-12) is False
    assert config.approx_equal_combined(0.0, 5e-4)
    assert config.approx_equal_combined(0.0, 5e-3) is False


def test_load_tolerance_config(tmp_path, monkeypatch):
    monkeypatch.setenv("ABS_TOL", "0.000001")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "tolerance:\n  abs_tol: ${ABS_TOL}\n  rel_tol: 1.0e-12\n  epsilon_multiplier: 4\n",
        encoding="utf-8",
    )

    config = load_tolerance_config(config_file)
    assert config.abs_tol == 1e-6
    assert config.rel_tol == 1e-12
    assert config.epsilon_multiplier == 4


def test_load_tolerance_config_missing_section(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("other: 1\n", encoding="utf-8")

    assert load_tolerance_config(config_file) == ToleranceConfig()


def test_load_tolerance_config_invalid_values(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("tolerance:\n  abs_tol: -1.0\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid tolerance config"):
        load_tolerance_config(config_file)


def test_load_tolerance_config_section_not_dict(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("tolerance: 5\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a mapping"):
        load_tolerance_config(config_file)


def test_load_tolerance_config_logs_debug(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("tolerance:\n  epsilon_multiplier: 2\n", encoding="utf-8")

    with capture_logs() as logs:
        load_tolerance_config(config_file)

    assert len(logs) == 1
    assert logs[0]["event"] == "Tolerance config loaded"
    assert logs[0]["log_level"] == "debug"
    assert logs[0]["epsilon_multiplier"] == 2
    assert logs[0]["path"] == str(config_file)
