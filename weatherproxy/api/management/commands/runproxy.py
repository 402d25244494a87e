"""Serve the weather proxy on all interfaces."""
from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.core.checks import Tags
from django.core.checks.registry import registry
from django.core.checks.urls import check_resolver
from django.core.management.base import BaseCommand, CommandError
from django.core.servers.basehttp import run
from django.urls import get_resolver

from weatherproxy.api.handlers import build_application
from weatherproxy.core.config import MissingAPIKeyError, ProxyConfig


logger = logging.getLogger(__name__)

LISTEN_ADDR = "0.0.0.0"


class Command(BaseCommand):
    help = "Start the /weather proxy. The API key comes from -apikey or OPENWEATHER_API_KEY."

    # Checks run in handle() against the handler's own URLconf.
    requires_system_checks: list = []

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("-apikey", "--apikey", dest="apikey", default="", help="OpenWeather API key")
        parser.add_argument("--port", type=int, default=None, help="Listening port (defaults to PORT or 8080)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            config = ProxyConfig.from_settings(api_key=options.get("apikey"))
        except MissingAPIKeyError as exc:
            raise CommandError(str(exc)) from exc

        port = options.get("port") or settings.WEATHERPROXY_PORT
        application = build_application(config)
        self._check(application)

        logger.info("Starting server on port %s", port)
        try:
            run(LISTEN_ADDR, int(port), application, threading=True)
        except OSError as exc:
            raise CommandError(f"Error serving on {LISTEN_ADDR}:{port}: {exc}") from exc
        except KeyboardInterrupt:
            logger.info("Server stopped")

    def _check(self, application) -> None:
        # ROOT_URLCONF resolves its own key from the environment; check the served routes instead.
        tags = [tag for tag in registry.tags_available() if tag != Tags.urls]
        self.check(tags=tags, display_num_errors=True)
        errors = check_resolver(get_resolver(application.urlconf))
        if errors:
            raise CommandError("\n".join(str(error) for error in errors))
