#!/usr/bin/env python3
"""
Configuration module for the AI Gateway.
Loads settings from a YAML file, applies environment overrides and
initializes logging with Pydantic validation.
"""

import os
import sys
import logging
from typing import Dict, Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

CONFIG_FILE = "config.yml"
API_KEY_ENV = "OPENAI_API_KEY"

logger = logging.getLogger("ai-gateway")


class ServerConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    http_log_level: str = "INFO"
    cors_origins: List[str] = ["https://guess-ai.app", "http://localhost:3000"]
    max_body_bytes: int = 1024 * 1024
    max_upload_bytes: int = 25 * 1024 * 1024


class ProviderConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    api_key: str = ""
    base_url: str = "https://api.openai.com/v1"
    timeout: float = 60.0
    transcription_model: str = "whisper-1"
    embedding_model: str = "text-embedding-ada-002"


class RequestProxyConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    enabled: bool = False
    url: Optional[str] = None


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load and validate configuration with Pydantic models.

    The file is optional: without it every section falls back to its
    defaults and the credential must come from the environment.
    """
    path = path or os.environ.get("GATEWAY_CONFIG", CONFIG_FILE)
    try:
        config_data: Dict[str, Any] = {}
        if os.path.exists(path):
            with open(path, encoding="utf-8") as file:
                config_data = yaml.safe_load(file) or {}
        if not isinstance(config_data, dict):
            raise ValueError(f"{path} must contain a mapping of sections")

        sections = {}
        for name in ("server", "provider", "requestProxy"):
            section = config_data.get(name) or {}
            if not isinstance(section, dict):
                raise ValueError(f"section '{name}' must be a mapping")
            sections[name] = dict(section)

        # Environment variable override for the provider credential
        if os.environ.get(API_KEY_ENV):
            sections["provider"]["api_key"] = os.environ[API_KEY_ENV].strip()

        # Validate each configuration section
        config_data["server"] = ServerConfig.model_validate(sections["server"]).model_dump()
        config_data["provider"] = ProviderConfig.model_validate(sections["provider"]).model_dump()
        config_data["requestProxy"] = RequestProxyConfig.model_validate(sections["requestProxy"]).model_dump()

        return config_data
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        print(f"Error in configuration: {e}")
        sys.exit(1)


def setup_logging(config_: Dict[str, Any]) -> logging.Logger:
    """Configure logging based on validated configuration."""
    log_level = config_["server"]["log_level"]
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level_int,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.setLevel(log_level_int)
    logger.info("Logging level set to %s", log_level)
    return logger
