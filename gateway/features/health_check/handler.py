from typing import Dict

from fastapi import Depends
from gateway.dependencies import get_provider_client
from gateway.services.provider_client import ProviderClient
from .query import HealthCheckResponse, ServiceStatus

class HealthCheckHandler:
    def __init__(self, provider_client: ProviderClient = Depends(get_provider_client)):
        self._client = provider_client

    async def handle(self) -> HealthCheckResponse:
        services_status: Dict[str, ServiceStatus] = {}

        # A provider answering below 500 is reachable, even if it rejects the key
        status_code = await self._client.probe()
        services_status["provider"] = "up" if status_code is not None and status_code < 500 else "down"

        overall_status = "ok" if all(s == "up" for s in services_status.values()) else "error"
        return HealthCheckResponse(status=overall_status, services=services_status)
