import logging
import os

import pytest

from meshreport import config
from meshreport.logging_config import resolve_level, setup_logging
from meshreport.main import main


@pytest.mark.integration
def test_main_prints_report(example_file, capsys):
    assert main([str(example_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("=== Global Data ===")
    assert "Element 1: Nodes = [1, 2, 3, 3]" in out


@pytest.mark.integration
def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


@pytest.mark.integration
def test_main_malformed_file_reports_line(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("*Node\n1, 0.0\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "error: line 2:" in capsys.readouterr().err


@pytest.mark.integration
def test_main_reads_input_from_environment(example_file, monkeypatch, capsys):
    monkeypatch.setenv(config.INPUT_ENV, str(example_file))
    assert main([]) == 0
    assert "Conductivity:           5.5" in capsys.readouterr().out


@pytest.mark.integration
def test_main_defaults_to_data_txt_in_cwd(example_file, monkeypatch, capsys):
    monkeypatch.delenv(config.INPUT_ENV, raising=False)
    monkeypatch.chdir(example_file.parent)
    assert main([]) == 0


@pytest.mark.integration
def test_main_writes_log_file(example_file, tmp_path, capsys):
    log_file = tmp_path / "run.log"
    assert main([str(example_file), "--log-level", "INFO", "--log-file", str(log_file)]) == 0
    assert "Parsed 3 nodes" in log_file.read_text(encoding="utf-8")


def test_get_input_path_precedence(monkeypatch):
    monkeypatch.setenv(config.INPUT_ENV, "from_env.txt")
    assert config.get_input_path("given.txt") == "given.txt"
    assert config.get_input_path() == "from_env.txt"
    monkeypatch.delenv(config.INPUT_ENV)
    assert config.get_input_path() == os.path.join(os.getcwd(), "data.txt")


def test_sample_mesh_is_bundled():
    assert os.path.exists(config.SAMPLE_MESH_PATH)


def test_resolve_level(monkeypatch):
    monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
    assert resolve_level() == logging.WARNING
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("not-a-level") == logging.WARNING
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "INFO")
    assert resolve_level() == logging.INFO


def test_setup_logging_configures_package_logger(tmp_path):
    logger = logging.getLogger("meshreport")
    setup_logging("INFO")
    setup_logging("DEBUG", log_file=str(tmp_path / "debug.log"))
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG
    assert not any(handler in logging.getLogger().handlers for handler in logger.handlers)
    assert "Logging initialized." in (tmp_path / "debug.log").read_text(encoding="utf-8")


def test_setup_logging_replaces_handlers():
    logger = logging.getLogger("meshreport")
    setup_logging("WARNING")
    setup_logging("WARNING")
    assert len(logger.handlers) == 1
