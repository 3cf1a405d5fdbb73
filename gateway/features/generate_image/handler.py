# gateway/features/generate_image/handler.py
from fastapi import Depends

from gateway.dependencies import get_provider_client
from gateway.services.provider_client import ProviderClient
from gateway.shared.config import logger
from gateway.shared.errors import ProviderError, to_http_exception

from .command import GenerateImageRequest, ImageGeneration

IMAGE_GENERATIONS_PATH = "/images/generations"


class GenerateImageHandler:
    def __init__(self, provider_client: ProviderClient = Depends(get_provider_client)):
        self._client = provider_client

    async def handle(self, request: GenerateImageRequest) -> str:
        """Returns the URL of the first generated image."""
        logger.info(
            "Forwarding image request for model '%s' (size=%s, quality=%s, n=%d).",
            request.model, request.size, request.quality, request.n,
        )
        try:
            generation = await self._client.post_json(
                IMAGE_GENERATIONS_PATH, request.model_dump(), ImageGeneration
            )
        except ProviderError as e:
            raise to_http_exception(e) from e

        return generation.data[0].url
