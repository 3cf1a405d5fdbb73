#!/usr/bin/env python3
"""
Dependency provider functions for the application.
"""

from typing import Any, Dict

from fastapi import Request

from gateway.services.provider_client import ProviderClient


def get_config(request: Request) -> Dict[str, Any]:
    """Returns the validated configuration loaded at startup."""
    return request.app.state.config


def get_provider_client(request: Request) -> ProviderClient:
    """Returns the shared ProviderClient instance."""
    return request.app.state.provider_client
