"""WSGI entry point for running the proxy behind an external server.

Loading the module fails with ``MissingAPIKeyError`` when OPENWEATHER_API_KEY
is empty, so the server never starts without a key.
"""
from __future__ import annotations

import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherproxy.settings")
django.setup(set_prefix=False)

from weatherproxy.api.handlers import build_application  # noqa: E402
from weatherproxy.core.config import ProxyConfig  # noqa: E402

application = build_application(ProxyConfig.from_settings())
