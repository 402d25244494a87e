"""Django settings for the weather proxy."""
from __future__ import annotations

import os

from django.core.exceptions import ImproperlyConfigured


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY", "weatherproxy-insecure-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "weatherproxy.api.apps.ApiConfig",
]

MIDDLEWARE = [
    "weatherproxy.api.middleware.CorrelationIdMiddleware",
]

ROOT_URLCONF = "weatherproxy.urls"

WSGI_APPLICATION = "weatherproxy.wsgi.application"

# No persistence layer.
DATABASES: dict = {}

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

OPENWEATHER_API_KEY = os.environ.get("OPENWEATHER_API_KEY", "")
OPENWEATHER_URL = os.environ.get("OPENWEATHER_URL", "https://api.openweathermap.org/data/2.5/weather")
# 0 disables the outbound timeout.
OPENWEATHER_TIMEOUT = float(os.environ.get("OPENWEATHER_TIMEOUT", "10"))

WEATHERPROXY_PORT = int(os.environ.get("PORT") or "8080")
WEATHERPROXY_EXPOSE_ERRORS = os.environ.get("WEATHERPROXY_EXPOSE_ERRORS", "1") == "1"
WEATHERPROXY_LOG_LEVEL = os.environ.get("WEATHERPROXY_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "weatherproxy": {
            "handlers": ["console"],
            "level": WEATHERPROXY_LOG_LEVEL,
            "propagate": True,
        },
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True
