"""Process-wide configuration for the weather proxy."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from django.core.exceptions import ImproperlyConfigured

DEFAULT_OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class MissingAPIKeyError(ImproperlyConfigured):
    """Raised when neither the flag nor the environment provides an API key."""


def resolve_api_key(flag_value: Optional[str], env_value: Optional[str]) -> str:
    """Return the API key, preferring the command-line flag over the environment."""

    api_key = (flag_value or "").strip() or (env_value or "").strip()
    if not api_key:
        raise MissingAPIKeyError(
            "API key is required. Provide it using -apikey flag or set "
            "OPENWEATHER_API_KEY environment variable."
        )
    return api_key


@dataclass(frozen=True)
class ProxyConfig:
    """Immutable configuration handed to the request handler."""

    api_key: str
    base_url: str = DEFAULT_OPENWEATHER_URL
    timeout: Optional[float] = 10.0
    expose_errors: bool = True

    @classmethod
    def from_settings(cls, source: Any = None, *, api_key: Optional[str] = None) -> "ProxyConfig":
        """Build the config once from settings; ``api_key`` takes precedence over them.

        Raises :class:`MissingAPIKeyError` when no key can be resolved.
        """
        if source is None:
            from django.conf import settings as source

        timeout = getattr(source, "OPENWEATHER_TIMEOUT", cls.timeout)
        return cls(
            api_key=resolve_api_key(api_key, getattr(source, "OPENWEATHER_API_KEY", "")),
            base_url=getattr(source, "OPENWEATHER_URL", DEFAULT_OPENWEATHER_URL),
            timeout=timeout or None,
            expose_errors=getattr(source, "WEATHERPROXY_EXPOSE_ERRORS", True),
        )

    def __repr__(self) -> str:
        return (
            f"ProxyConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, expose_errors={self.expose_errors!r})"
        )


__all__ = ["ProxyConfig", "MissingAPIKeyError", "resolve_api_key", "DEFAULT_OPENWEATHER_URL"]
