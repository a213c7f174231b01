import logging

import pytest

from vpn_servername.config import (
    LogConfig,
    WriterSettings,
    load_environment,
    setup_logging,
    validate_config,
    validate_file_mode,
)
from vpn_servername.formatters import RecordFormat


@pytest.mark.parametrize("value,expected", [
    ("600", 0o600),
    ("0600", 0o600),
    ("0o400", 0o400),
    ("700", 0o700),
])
def test_parse_file_mode(value, expected):
    assert WriterSettings.parse_file_mode(value) == expected


@pytest.mark.parametrize("value", ["rw", "999", "1000", ""])
def test_parse_file_mode_invalid(value):
    with pytest.raises(ValueError):
        WriterSettings.parse_file_mode(value)


def test_settings_reject_group_access():
    with pytest.raises(ValueError):
        WriterSettings(file_mode=0o640)


def test_settings_reject_no_owner_access():
    with pytest.raises(ValueError):
        WriterSettings(file_mode=0o000)


def test_settings_from_env_defaults():
    settings = WriterSettings.from_env()
    assert settings.record_format is RecordFormat.SIDECAR
    assert settings.file_mode == 0o600


def test_validate_config_ok():
    validate_config()


def test_validate_config_collects_errors(monkeypatch):
    monkeypatch.setenv("SERVERNAME_FORMAT", "yaml")
    monkeypatch.setenv("SERVERNAME_FILE_MODE", "644")

    with pytest.raises(ValueError) as exc_info:
        validate_config()

    message = str(exc_info.value)
    assert "Unknown record format" in message
    assert "group/other" in message


def test_load_environment_from_file(tmp_path):
    env_file = tmp_path / "vpn.env"
    env_file.write_text("SERVERNAME_FORMAT=env\n")

    load_environment(str(env_file))
    assert WriterSettings.from_env().record_format is RecordFormat.ENV


def test_load_environment_missing_file(tmp_path, caplog):
    load_environment(str(tmp_path / "missing.env"))
    assert "Environment file not found" in caplog.text


@pytest.mark.parametrize("mode", [0o600, 0o400, 0o700, 0o200])
def test_validate_file_mode_accepts_owner_only(mode):
    validate_file_mode(mode)


@pytest.mark.parametrize("mode", [0o000, 0o644, 0o606, 0o660])
def test_validate_file_mode_rejects(mode):
    with pytest.raises(ValueError):
        validate_file_mode(mode)


def test_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert LogConfig.log_level() == logging.INFO

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert LogConfig.log_level() == logging.INFO


def test_logging_settings_from_env_file(tmp_path):
    log_path = tmp_path / "servername.log"
    env_file = tmp_path / "vpn.env"
    env_file.write_text(f"LOG_LEVEL=warning\nLOG_FILE={log_path}\n")

    load_environment(str(env_file))
    assert LogConfig.log_level() == logging.WARNING
    assert LogConfig.log_file() == str(log_path)

    root = logging.getLogger()
    handlers_before = list(root.handlers)
    try:
        setup_logging()
        assert log_path.exists()
    finally:
        for handler in root.handlers[:]:
            if handler not in handlers_before:
                root.removeHandler(handler)
                handler.close()
