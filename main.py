#!/usr/bin/env python3
"""
AI Gateway
Forwards chat, image, speech and embedding requests to a generative-AI
provider and returns simplified responses.
"""

import sys
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import httpx
import uvicorn

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gateway.shared.config import load_config, logger, setup_logging
from gateway.shared.middleware import RequestIDMiddleware, add_process_time_header, limit_body_size
from gateway.shared.utils import get_local_ip, mask_key
from gateway.services.provider_client import ProviderClient

from gateway.features.generate_chat.endpoints import router as generate_chat_router
from gateway.features.generate_image.endpoints import router as generate_image_router
from gateway.features.generate_speech.endpoints import router as generate_speech_router
from gateway.features.transcribe_speech.endpoints import router as transcribe_speech_router
from gateway.features.embeddings.endpoints import router as embeddings_router
from gateway.features.similarity.endpoints import router as similarity_router
from gateway.features.health_check.endpoints import router as health_check_router
from gateway.features.metrics.endpoints import router as metrics_router


def create_app(config: Dict[str, Any], transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """Builds the gateway application around a validated configuration.

    ``transport`` replaces the network layer of the outbound client.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan resources."""
        client_kwargs: Dict[str, Any] = {"timeout": config["provider"]["timeout"]}
        if transport is not None:
            client_kwargs["transport"] = transport
        elif config["requestProxy"]["enabled"] and config["requestProxy"]["url"]:
            client_kwargs["proxy"] = config["requestProxy"]["url"]
            logger.info("Using proxy for httpx client: %s", config["requestProxy"]["url"])
        app.state.http_client = httpx.AsyncClient(**client_kwargs)

        app.state.provider_client = ProviderClient(
            http_client=app.state.http_client,
            api_key=config["provider"]["api_key"],
            base_url=config["provider"]["base_url"],
        )

        logger.info("Application startup complete")
        yield
        await app.state.http_client.aclose()
        logger.info("Application shutdown complete")

    app = FastAPI(
        title="AI Gateway",
        description="Forwards generation requests to a generative-AI provider",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config

    app.include_router(generate_chat_router, tags=["Generation"])
    app.include_router(generate_image_router, tags=["Generation"])
    app.include_router(generate_speech_router, tags=["Generation"])
    app.include_router(transcribe_speech_router, tags=["Generation"])
    app.include_router(embeddings_router, tags=["Embeddings"])
    app.include_router(similarity_router, tags=["Embeddings"])
    app.include_router(health_check_router, tags=["Monitoring"])
    app.include_router(metrics_router)

    app.middleware("http")(limit_body_size)
    app.add_middleware(RequestIDMiddleware)
    app.middleware("http")(add_process_time_header)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config["server"]["cors_origins"],
        allow_methods=["GET", "POST"],
        allow_headers=["authorization", "accept", "content-type"],
        max_age=3600,
    )
    return app


def run() -> None:
    config = load_config()
    setup_logging(config)

    if not config["provider"]["api_key"]:
        logger.error("No provider API key found in config.yml or OPENAI_API_KEY environment variable. Exiting.")
        sys.exit(1)

    host = config["server"]["host"]
    port = config["server"]["port"]

    display_host = get_local_ip() if host == "0.0.0.0" else host
    logger.warning("Starting AI Gateway on %s:%s", host, port)
    logger.warning("Provider: %s (key: %s)", config["provider"]["base_url"], mask_key(config["provider"]["api_key"]))
    logger.warning("Metrics: http://%s:%s/metrics", display_host, port)

    log_config = uvicorn.config.LOGGING_CONFIG
    http_log_level = config["server"].get("http_log_level", "INFO").upper()
    log_config["loggers"]["uvicorn.access"]["level"] = http_log_level

    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_config=log_config,
        timeout_graceful_shutdown=30,
        server_header=False
    )


if __name__ == "__main__":
    run()
