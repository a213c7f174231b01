from pathlib import Path

import pytest

from vpn_servername import (
    EnvFormatter,
    FormatterFactory,
    RecordFormat,
    RecordFormatter,
    ServerName,
    SidecarFormatter,
)


def test_sidecar_target_path_appends_suffix():
    assert SidecarFormatter().target_path("test-wg.conf") == Path("test-wg.conf.servername")
    assert SidecarFormatter().target_path(Path("/etc/wg/wg0.conf")) == Path("/etc/wg/wg0.conf.servername")


def test_sidecar_render_and_parse():
    formatter = SidecarFormatter()
    assert formatter.render(ServerName("de_berlin.example")) == "de_berlin.example"
    assert formatter.parse("de_berlin.example") == "de_berlin.example"


def test_sidecar_parse_empty():
    with pytest.raises(ValueError):
        SidecarFormatter().parse("")


def test_env_target_path_is_output_path():
    assert EnvFormatter().target_path("test-wg.conf") == Path("test-wg.conf")


def test_env_render():
    assert EnvFormatter().render(ServerName("de_berlin.example")) == "SERVER_NAME='de_berlin.example'\n"


def test_env_parse_ignores_other_keys():
    content = "# comment\nREGION='de'\nSERVER_NAME='de_berlin.example'\n"
    assert EnvFormatter().parse(content) == "de_berlin.example"


def test_env_parse_missing_key():
    with pytest.raises(ValueError):
        EnvFormatter().parse("REGION='de'\n")


def test_build_record():
    record = SidecarFormatter().build_record("wg0.conf", ServerName("nl.example"))
    assert record.path == Path("wg0.conf.servername")
    assert record.content == "nl.example"


@pytest.mark.parametrize("name,expected", [
    ("sidecar", RecordFormat.SIDECAR),
    ("ENV", RecordFormat.ENV),
    (" Env ", RecordFormat.ENV),
])
def test_record_format_from_string(name, expected):
    assert RecordFormat.from_string(name) is expected


def test_record_format_from_string_unknown():
    with pytest.raises(ValueError, match="Unknown record format"):
        RecordFormat.from_string("yaml")


# Factory
def test_factory_creates_formatters():
    assert isinstance(FormatterFactory.create_formatter(RecordFormat.SIDECAR), SidecarFormatter)
    assert isinstance(FormatterFactory.create_formatter(RecordFormat.ENV), EnvFormatter)


def test_factory_supported_formats():
    assert set(FormatterFactory.get_supported_formats()) == set(RecordFormat)


def test_factory_register_formatter(monkeypatch):
    class UpperSidecarFormatter(SidecarFormatter):
        def render(self, server_name):
            return server_name.value.upper()

    monkeypatch.setitem(FormatterFactory._FORMATTERS, RecordFormat.SIDECAR, SidecarFormatter)
    FormatterFactory.register_formatter(RecordFormat.SIDECAR, UpperSidecarFormatter)

    formatter = FormatterFactory.create_formatter(RecordFormat.SIDECAR)
    assert isinstance(formatter, RecordFormatter)
    assert formatter.render(ServerName("nl.example")) == "NL.EXAMPLE"


def test_factory_unknown_format(monkeypatch):
    monkeypatch.delitem(FormatterFactory._FORMATTERS, RecordFormat.ENV)
    with pytest.raises(ValueError):
        FormatterFactory.create_formatter(RecordFormat.ENV)


def test_env_parse_does_not_interpolate(monkeypatch):
    monkeypatch.setenv("HOME", "/home/vpn")
    assert EnvFormatter().parse("SERVER_NAME='${HOME}.example'\n") == "${HOME}.example"


def test_env_render_rejects_backslash():
    with pytest.raises(ValueError, match="backslash"):
        EnvFormatter().render(ServerName("a\\b.example"))
