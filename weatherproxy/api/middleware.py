"""Correlation id tagging for every request handled by the proxy."""
from __future__ import annotations

import logging
from typing import Callable
from uuid import uuid4

from django.http import HttpRequest, HttpResponse
from django.utils.http import http_date


logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def generate_correlation_id() -> str:
    return uuid4().hex


class CorrelationIdMiddleware:
    """Attach a fresh correlation id to the request, its log lines and its response."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        correlation_id = generate_correlation_id()
        request.correlation_id = correlation_id
        logger.info(
            "[%s] Received request: Method=%s, URL=%s, ClientIP=%s, UserAgent=%s, Timestamp=%s",
            correlation_id,
            request.method,
            request.get_full_path(),
            request.META.get("REMOTE_ADDR", ""),
            request.META.get("HTTP_USER_AGENT", ""),
            http_date(),
        )

        response = self.get_response(request)
        response[CORRELATION_HEADER] = correlation_id
        logger.info("[%s] Responded with status %s", correlation_id, response.status_code)
        return response
