from pathlib import Path

import pytest
from pydantic import ValidationError

from trainreport.config.loader import load_monitor_config
from trainreport.config.schema import ReporterConfig
from trainreport.core.exceptions import ConfigurationError, InvalidConfigurationError

EXAMPLE_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "score_reporter.yaml"


def test_example_config_loads() -> None:
    cfg = load_monitor_config(EXAMPLE_CONFIG)
    assert cfg.reporter.report_frequency == 10
    assert cfg.reporter.report_epochs is True
    assert cfg.logging.level == "INFO"
    assert cfg.logging.format == "color"


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    cfg = load_monitor_config(empty)
    assert cfg.reporter == ReporterConfig()
    assert cfg.logging.use_tqdm is False


def test_missing_config_file_raises() -> None:
    with pytest.raises(ConfigurationError, match="Config file not found"):
        _ = load_monitor_config(Path("configs/does_not_exist.yaml"))


def test_zero_report_frequency_raises(tmp_path: Path) -> None:
    invalid = tmp_path / "invalid.yaml"
    invalid.write_text("reporter:\n  report_frequency: 0\n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError, match="Invalid config"):
        _ = load_monitor_config(invalid)


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    invalid = tmp_path / "unknown.yaml"
    invalid.write_text("reporter:\n  frequency: 5\n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError, match="Invalid config"):
        _ = load_monitor_config(invalid)


def test_non_mapping_payload_raises(tmp_path: Path) -> None:
    invalid = tmp_path / "list.yaml"
    invalid.write_text("- reporter\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="top-level YAML node"):
        _ = load_monitor_config(invalid)


def test_reporter_config_is_frozen() -> None:
    cfg = ReporterConfig(report_frequency=5)
    with pytest.raises(ValidationError):
        cfg.report_frequency = 7
