"""WSGI handler that serves the API routes bound to one ProxyConfig."""
from __future__ import annotations

from django.core.handlers.wsgi import WSGIHandler
from django.http import HttpRequest, HttpResponse

from weatherproxy.api.routes import build_urlpatterns
from weatherproxy.core.config import ProxyConfig


class ProxyURLConf:
    """URLconf object holding routes built for a single config."""

    def __init__(self, config: ProxyConfig) -> None:
        self.urlpatterns = build_urlpatterns(config)


class ProxyWSGIHandler(WSGIHandler):
    """Route every request through the URLconf built for ``config``."""

    def __init__(self, config: ProxyConfig) -> None:
        super().__init__()
        self.config = config
        self.urlconf = ProxyURLConf(config)

    def get_response(self, request: HttpRequest) -> HttpResponse:
        request.urlconf = self.urlconf
        return super().get_response(request)


def build_application(config: ProxyConfig) -> ProxyWSGIHandler:
    return ProxyWSGIHandler(config)


__all__ = ["ProxyURLConf", "ProxyWSGIHandler", "build_application"]
