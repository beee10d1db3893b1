"""Tests for the rebalance report entry point."""

import logging

import pytest

from portfolio_base import Asset, SavedPortfolio
from rebalancer_app import main as app_main
from rebalancer_app.store import JsonFileSnapshotStore


@pytest.fixture
def config_file(tmp_path):
    snapshot_path = tmp_path / "snapshot.json"
    path = tmp_path / "config.yaml"
    path.write_text(
        "storage:\n"
        f"  snapshot_file_path: {snapshot_path}\n"
        "logging:\n"
        "  level: WARNING\n",
        encoding="utf-8",
    )
    return path, snapshot_path


class TestRun:
    """Report built from the saved snapshot."""

    def test_no_snapshot(self, config_file, restore_root_logger):
        path, _ = config_file

        assert app_main.run(path) == ["No saved portfolio found"]

    def test_report_with_deposit(self, config_file, restore_root_logger):
        path, snapshot_path = config_file
        JsonFileSnapshotStore(str(snapshot_path)).save(SavedPortfolio(
            date=1700000000000,
            assets=[
                Asset(id="1", name="A", price=100, quantity=5, target_percentage=50),
                Asset(id="2", name="B", price=50, quantity=10, target_percentage=50),
            ],
        ))

        lines = app_main.run(path, cash_adjustment=200)

        assert lines[0].startswith("Portfolio saved on ")
        assert "Total portfolio value: 1 000" in lines
        assert "Amount to deposit: 200 (new total: 1 200)" in lines
        assert lines[-2:] == ["Buy A: 1 units for 100", "Buy B: 2 units for 100"]


class TestMain:
    """Command-line handling."""

    def test_invalid_argument(self, capsys):
        assert app_main.main(["lots"]) == 2
        assert "Invalid cash adjustment" in capsys.readouterr().err

    def test_prints_report(self, config_file, monkeypatch, capsys, restore_root_logger):
        path, _ = config_file
        monkeypatch.setenv("CONFIG_PATH", str(path))

        assert app_main.main([]) == 0
        assert "No saved portfolio found" in capsys.readouterr().out

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_non_finite_argument(self, raw, config_file, monkeypatch, capsys):
        path, _ = config_file
        monkeypatch.setenv("CONFIG_PATH", str(path))

        assert app_main.main([raw]) == 2
        assert "Invalid cash adjustment" in capsys.readouterr().err

    def test_comma_decimal_argument(self, config_file, monkeypatch, capsys, restore_root_logger):
        path, snapshot_path = config_file
        monkeypatch.setenv("CONFIG_PATH", str(path))
        JsonFileSnapshotStore(str(snapshot_path)).save(SavedPortfolio(
            date=1700000000000,
            assets=[Asset(id="1", name="A", price=100, quantity=5, target_percentage=100)],
        ))

        assert app_main.main(["-100,25"]) == 0
        assert "Amount to withdraw: 100.25 (new total: 400)" in capsys.readouterr().out

    def test_broken_config_syntax(self, tmp_path, monkeypatch, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("storage: [unclosed\n", encoding="utf-8")
        monkeypatch.setenv("CONFIG_PATH", str(path))

        with caplog.at_level(logging.ERROR):
            assert app_main.main([]) == 1

        assert "Failed to build rebalance report" in caplog.text
