from fastapi import Depends

from gateway.dependencies import get_provider_client
from gateway.services.provider_client import ProviderClient
from gateway.shared.config import logger
from gateway.shared.errors import ProviderError, to_http_exception

from .command import GenerateSpeechRequest

AUDIO_SPEECH_PATH = "/audio/speech"


class GenerateSpeechHandler:
    def __init__(self, provider_client: ProviderClient = Depends(get_provider_client)):
        self._client = provider_client

    async def handle(self, request: GenerateSpeechRequest) -> bytes:
        logger.info(
            "Forwarding speech request for model '%s' with voice '%s' (%d chars).",
            request.model, request.voice, len(request.input),
        )
        try:
            return await self._client.post_for_content(AUDIO_SPEECH_PATH, request.model_dump())
        except ProviderError as e:
            raise to_http_exception(e) from e
