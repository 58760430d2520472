import io
import json
from contextlib import contextmanager

import pytest
from rich.console import Console

from marketcap import main as main_module
from marketcap.config import Settings
from marketcap.errors import ConfigError, NetworkError

SETTINGS = Settings(
    MARKETCAP_URL="https://example.test/marketcap/",
    MARKETCAP_TIMEOUT=1.0,
    MARKETCAP_MARGIN=0,
    LOG_LEVEL="WARNING",
)


@pytest.fixture
def session_log(monkeypatch):
    log = []

    @contextmanager
    def fake_session(console):
        log.append("acquire")
        try:
            yield console
        finally:
            log.append("release")

    monkeypatch.setattr(main_module, "terminal_session", fake_session)
    monkeypatch.setattr(main_module, "get_settings", lambda: SETTINGS)
    return log


@pytest.fixture
def console(monkeypatch):
    console = Console(file=io.StringIO(), width=100, height=20, record=True, color_system=None)
    monkeypatch.setattr(main_module, "Console", lambda: console)
    return console


def test_main_renders_once_and_releases_terminal(monkeypatch, session_log, console, payload):
    urls = []

    def fake_fetch(url, timeout):
        urls.append(url)
        return payload

    monkeypatch.setattr(main_module, "fetch_marketcap", fake_fetch)

    assert main_module.main() == 0
    assert session_log == ["acquire", "release"]
    assert urls == ["https://example.test/marketcap/"]
    text = console.export_text()
    assert text.index("BCH_THB") < text.index("BTC_THB") < text.index("ETH_THB")


def test_network_error_reports_and_fails(monkeypatch, session_log, console, capsys):
    def fake_fetch(url, timeout):
        raise NetworkError("Unable to reach it", url)

    monkeypatch.setattr(main_module, "fetch_marketcap", fake_fetch)

    assert main_module.main() == 1
    assert session_log == ["acquire", "release"]
    assert "NetworkError: Unable to reach it" in capsys.readouterr().err
    assert "MarketCap" not in console.export_text()


def test_malformed_payload_draws_no_rows(monkeypatch, session_log, console, capsys):
    monkeypatch.setattr(main_module, "fetch_marketcap", lambda url, timeout: b'{"BCH_THB": {"last": "1"}}')

    assert main_module.main() == 1
    assert session_log == ["acquire", "release"]
    assert capsys.readouterr().err.startswith("MalformedPayload: ")
    assert "BCH_THB" not in console.export_text()


def test_out_of_range_number_is_reported_not_raised(monkeypatch, session_log, console, capsys, make_record):
    raw = json.dumps({"BCH_THB": make_record(last="1e1000000")}).encode()
    monkeypatch.setattr(main_module, "fetch_marketcap", lambda url, timeout: raw)

    assert main_module.main() == 1
    assert session_log == ["acquire", "release"]
    assert capsys.readouterr().err.startswith("MalformedPayload: ")


def test_bad_configuration_is_reported_not_raised(monkeypatch, capsys):
    def broken_settings():
        raise ConfigError("MARKETCAP_TIMEOUT must be a number, got 'ten'")

    monkeypatch.setattr(main_module, "get_settings", broken_settings)

    assert main_module.main() == 1
    assert "ConfigError: MARKETCAP_TIMEOUT" in capsys.readouterr().err
