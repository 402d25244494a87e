from __future__ import annotations

import json
from io import StringIO

import pytest
import requests
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import RequestFactory, override_settings

from weatherproxy.api.handlers import ProxyWSGIHandler
from weatherproxy.api.management.commands import runproxy
from weatherproxy.core.config import MissingAPIKeyError, ProxyConfig, resolve_api_key

UPSTREAM_URL = "https://openweather.test/data/2.5/weather"


class RunRecorder:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list = []
        self.error = error

    def __call__(self, addr, port, wsgi_handler, **kwargs) -> None:
        self.calls.append((addr, port, wsgi_handler, kwargs))
        if self.error is not None:
            raise self.error


@pytest.fixture()
def recorder(monkeypatch) -> RunRecorder:
    recorder = RunRecorder()
    monkeypatch.setattr(runproxy, "run", recorder)
    return recorder


def test_resolve_api_key_prefers_flag() -> None:
    assert resolve_api_key("flag", "env") == "flag"
    assert resolve_api_key("", "env") == "env"
    assert resolve_api_key(None, "env") == "env"


def test_resolve_api_key_requires_a_value() -> None:
    with pytest.raises(MissingAPIKeyError):
        resolve_api_key("", "")
    with pytest.raises(MissingAPIKeyError):
        resolve_api_key(None, "   ")


def test_config_from_settings() -> None:
    with override_settings(OPENWEATHER_API_KEY="abc", OPENWEATHER_TIMEOUT=0, WEATHERPROXY_EXPOSE_ERRORS=False):
        config = ProxyConfig.from_settings()

    assert config.api_key == "abc"
    assert config.base_url == UPSTREAM_URL
    assert config.timeout is None
    assert config.expose_errors is False
    assert "abc" not in repr(config)


def test_runproxy_without_key_is_fatal(recorder) -> None:
    with override_settings(OPENWEATHER_API_KEY=""):
        with pytest.raises(CommandError) as excinfo:
            call_command("runproxy")

    assert "API key is required" in str(excinfo.value)
    assert recorder.calls == []


def test_config_from_settings_requires_key() -> None:
    with override_settings(OPENWEATHER_API_KEY="  "):
        with pytest.raises(MissingAPIKeyError):
            ProxyConfig.from_settings()

    with override_settings(OPENWEATHER_API_KEY=""):
        assert ProxyConfig.from_settings(api_key="flag").api_key == "flag"


def test_runproxy_flag_overrides_environment(recorder) -> None:
    with override_settings(OPENWEATHER_API_KEY="env-key", WEATHERPROXY_PORT=9090):
        call_command("runproxy", apikey="flag-key")
        assert settings.OPENWEATHER_API_KEY == "env-key"

    (addr, port, handler, kwargs), = recorder.calls
    assert (addr, port, kwargs) == ("0.0.0.0", 9090, {"threading": True})
    assert isinstance(handler, ProxyWSGIHandler)
    assert handler.config.api_key == "flag-key"
    assert handler.config.base_url == UPSTREAM_URL


def test_runproxy_flag_works_without_environment_key(recorder) -> None:
    with override_settings(OPENWEATHER_API_KEY=""):
        call_command("runproxy", apikey="flag-key")

    assert recorder.calls[0][2].config.api_key == "flag-key"


def test_runproxy_falls_back_to_environment_key(recorder) -> None:
    with override_settings(OPENWEATHER_API_KEY="env-key", WEATHERPROXY_PORT=8080):
        call_command("runproxy", port=8181)

    assert recorder.calls[0][:2] == ("0.0.0.0", 8181)
    assert recorder.calls[0][2].config.api_key == "env-key"


def test_runproxy_handler_serves_resolved_key(recorder, requests_mock) -> None:
    requests_mock.get(UPSTREAM_URL, json={"weather": [{"main": "Clear"}], "main": {"temp": 295.15}})
    with override_settings(OPENWEATHER_API_KEY="env-key"):
        call_command("runproxy", apikey="flag-key")

    handler = recorder.calls[0][2]
    response = handler.get_response(RequestFactory().get("/weather", {"lat": "1", "lon": "2"}))

    assert response.status_code == 200
    assert requests_mock.last_request.qs["appid"] == ["flag-key"]

def test_runproxy_bind_failure_is_fatal(recorder) -> None:
    recorder.error = OSError(98, "Address already in use")

    with override_settings(OPENWEATHER_API_KEY="env-key"):
        with pytest.raises(CommandError) as excinfo:
            call_command("runproxy")

    assert "Address already in use" in str(excinfo.value)


def test_fetchweather_prints_payload(requests_mock) -> None:
    requests_mock.get(UPSTREAM_URL, json={"weather": [{"main": "Clouds"}], "main": {"temp": 303.15}})
    out = StringIO()

    call_command("fetchweather", lat="40.4", lon="-3.7", stdout=out)

    assert json.loads(out.getvalue()) == {
        "weather_condition": "Clouds",
        "temperature": "30.00°C",
        "temperature_condition": "Hot",
    }
    assert requests_mock.last_request.qs["appid"] == ["test-key"]


def test_fetchweather_requires_coordinates(requests_mock) -> None:
    with pytest.raises(CommandError):
        call_command("fetchweather", lat="40.4")

    assert requests_mock.call_count == 0


def test_fetchweather_reports_upstream_failure(requests_mock) -> None:
    requests_mock.get(UPSTREAM_URL, exc=requests.exceptions.ConnectionError("unreachable"))

    with pytest.raises(CommandError) as excinfo:
        call_command("fetchweather", lat="40.4", lon="-3.7", apikey="other")

    assert str(excinfo.value) == "unreachable"
    assert requests_mock.last_request.qs["appid"] == ["other"]
