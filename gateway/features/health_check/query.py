from pydantic import BaseModel
from typing import Dict, Literal

ServiceStatus = Literal["up", "down"]


class HealthCheckResponse(BaseModel):
    """Overall gateway status plus the reachability of each upstream."""
    status: Literal["ok", "error"]
    services: Dict[str, ServiceStatus]
