"""
Classified failures of an outbound provider call.
"""

from fastapi import HTTPException


class ProviderError(Exception):
    """Base class for any failed provider call."""

    status_code = 502
    detail = "Provider request failed"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class ProviderTransportError(ProviderError):
    """The provider could not be reached."""

    status_code = 503
    detail = "Unable to connect to provider"


class ProviderTimeoutError(ProviderTransportError):
    status_code = 504
    detail = "Provider request timed out"


class ProviderStatusError(ProviderError):
    """The provider answered with a non-2xx status."""

    def __init__(self, provider_status: int, message: str):
        self.provider_status = provider_status
        self.message = message
        super().__init__(f"Provider error ({provider_status}): {message}")


class ProviderShapeError(ProviderError):
    """The provider answered 2xx but the body is not what we consume."""

    detail = "Unexpected response from provider"


def to_http_exception(exc: ProviderError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.detail)
