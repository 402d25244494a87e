"""API URL configuration."""
from __future__ import annotations

from weatherproxy.api.routes import build_urlpatterns
from weatherproxy.core.config import ProxyConfig

# Resolved once at import; an empty OPENWEATHER_API_KEY fails here.
urlpatterns = build_urlpatterns(ProxyConfig.from_settings())
