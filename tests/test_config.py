"""Tests for configuration loading and validation."""

import pytest

from rebalancer_config import AppConfig, get_config, load_config


class TestAppConfig:
    """Defaults and field validation."""

    def test_defaults(self):
        config = AppConfig()

        assert config.engine.balance_tolerance == 0.01
        assert config.engine.target_sum_tolerance == 0.01
        assert config.presentation.deviation_display_threshold_percent == 0.1
        assert config.logging.level == "INFO"
        assert config.logging.file_path is None

    def test_log_level_is_normalized(self):
        assert AppConfig(logging={"level": "debug"}).logging.level == "DEBUG"

    @pytest.mark.parametrize(
        "raw",
        [
            {"logging": {"level": "verbose"}},
            {"logging": {"format": "xml"}},
            {"engine": {"balance_tolerance": -1}},
            {"presentation": {"decimal_separator": ""}},
        ],
    )
    def test_invalid_values(self, raw):
        with pytest.raises(ValueError):
            AppConfig(**raw)


class TestLoader:
    """YAML loading and singleton access."""

    def test_get_config_before_load(self):
        with pytest.raises(RuntimeError):
            get_config()

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "engine:\n"
            "  balance_tolerance: 0.5\n"
            "storage:\n"
            "  snapshot_file_path: /tmp/snap.json\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.engine.balance_tolerance == 0.5
        assert config.engine.target_sum_tolerance == 0.01
        assert config.storage.snapshot_file_path == "/tmp/snap.json"
        assert get_config() is config

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == AppConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  format: xml\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)
