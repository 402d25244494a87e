from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherproxy.settings")
os.environ["OPENWEATHER_API_KEY"] = "test-key"
os.environ["OPENWEATHER_URL"] = "https://openweather.test/data/2.5/weather"

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker
