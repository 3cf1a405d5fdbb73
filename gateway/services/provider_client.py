"""
ProviderClient for the AI Gateway.
Sends requests to the provider's REST API with the configured credential.
"""

import time
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from gateway.shared.config import logger
from gateway.shared.errors import (
    ProviderShapeError,
    ProviderStatusError,
    ProviderTimeoutError,
    ProviderTransportError,
)
from gateway.shared.metrics import PROVIDER_LATENCY, PROVIDER_REQUESTS, PROVIDER_SHAPE_ERRORS
from gateway.shared.utils import mask_key, redact_secret

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)

HEALTH_TIMEOUT = 5.0


def extract_error_message(response: httpx.Response) -> str:
    """Pulls the human-readable message out of a provider error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:500] or response.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
    return response.text[:500]


class ProviderClient:
    """Sends one request per call to the provider. No retries."""

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, base_url: str):
        self._client = http_client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        logger.info("Provider client ready for %s (key: %s)", self._base_url, mask_key(api_key))

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def _redact(self, text: str) -> str:
        return redact_secret(text, self._api_key)

    async def _send(self, path: str, **kwargs: Any) -> httpx.Response:
        """POSTs to the provider and classifies any failure."""
        start_time = time.time()
        outcome = "error"
        try:
            response = await self._client.post(
                f"{self._base_url}{path}", headers=self._headers(), **kwargs
            )
            response.raise_for_status()
            outcome = "ok"
            return response
        except httpx.HTTPStatusError as e:
            outcome = "provider_error"
            message = self._redact(extract_error_message(e.response))
            logger.error("HTTP error from provider on %s: %s - %s", path, e.response.status_code, message)
            raise ProviderStatusError(e.response.status_code, message) from e
        except httpx.TimeoutException as e:
            outcome = "timeout"
            logger.error("Timeout calling provider on %s: %s", path, self._redact(str(e)))
            raise ProviderTimeoutError() from e
        except httpx.RequestError as e:
            outcome = "transport_error"
            logger.error("Connection error to provider on %s: %s", path, self._redact(str(e)))
            raise ProviderTransportError() from e
        finally:
            PROVIDER_REQUESTS.labels(endpoint=path, outcome=outcome).inc()
            PROVIDER_LATENCY.labels(endpoint=path).observe(time.time() - start_time)

    def _parse(self, path: str, response: httpx.Response, model: Type[ResponseModel]) -> ResponseModel:
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            PROVIDER_SHAPE_ERRORS.labels(endpoint=path).inc()
            logger.error("Unexpected response shape from provider on %s: %s", path, self._redact(str(e)))
            raise ProviderShapeError() from e

    async def post_json(
        self, path: str, payload: Dict[str, Any], model: Type[ResponseModel]
    ) -> ResponseModel:
        """Sends a JSON payload and parses the JSON answer into model."""
        response = await self._send(path, json=payload)
        return self._parse(path, response, model)

    async def post_for_content(self, path: str, payload: Dict[str, Any]) -> bytes:
        """Sends a JSON payload and returns the raw response body."""
        response = await self._send(path, json=payload)
        if not response.content:
            PROVIDER_SHAPE_ERRORS.labels(endpoint=path).inc()
            logger.error("Empty response body from provider on %s", path)
            raise ProviderShapeError()
        return response.content

    async def post_multipart(
        self,
        path: str,
        data: Dict[str, str],
        files: Dict[str, Any],
        model: Type[ResponseModel],
    ) -> ResponseModel:
        """Sends a multipart form and parses the JSON answer into model."""
        response = await self._send(path, data=data, files=files)
        return self._parse(path, response, model)

    async def probe(self, path: str = "/models") -> Optional[int]:
        """Returns the provider's status for a cheap GET, or None if unreachable."""
        try:
            response = await self._client.get(
                f"{self._base_url}{path}", headers=self._headers(), timeout=HEALTH_TIMEOUT
            )
        except httpx.HTTPError as e:
            logger.error("Provider health check failed: %s", self._redact(str(e)))
            return None
        return response.status_code
