from __future__ import annotations


class UpstreamError(RuntimeError):
    """Base upstream error: transport failure or a non-2xx reply."""


class UpstreamDecodeError(UpstreamError):
    """Raised when the upstream body cannot be decoded into the expected shape."""


class EmptyConditionsError(UpstreamDecodeError):
    """Raised when the upstream payload carries no weather conditions."""


__all__ = ["UpstreamError", "UpstreamDecodeError", "EmptyConditionsError"]
