from typing import Any, Dict

from fastapi import Depends, HTTPException

from gateway.dependencies import get_config, get_provider_client
from gateway.services.provider_client import ProviderClient
from gateway.shared.config import logger
from gateway.shared.errors import ProviderError, to_http_exception

from .command import RECORDING_CONTENT_TYPE, RECORDING_FILENAME, Transcription

AUDIO_TRANSCRIPTIONS_PATH = "/audio/transcriptions"


class TranscribeSpeechHandler:
    """
    Forwards an uploaded recording to the provider's transcription endpoint.
    The upload is always sent as a WAV recording under a fixed filename.
    """

    def __init__(
        self,
        provider_client: ProviderClient = Depends(get_provider_client),
        config: Dict[str, Any] = Depends(get_config),
    ):
        self._client = provider_client
        self._model = config["provider"]["transcription_model"]

    async def handle(self, audio: bytes) -> str:
        if not audio:
            raise HTTPException(status_code=422, detail="Uploaded audio file is empty")

        logger.info("Forwarding %d bytes of audio for transcription with '%s'.", len(audio), self._model)
        try:
            transcription = await self._client.post_multipart(
                AUDIO_TRANSCRIPTIONS_PATH,
                data={"model": self._model},
                files={"file": (RECORDING_FILENAME, audio, RECORDING_CONTENT_TYPE)},
                model=Transcription,
            )
        except ProviderError as e:
            raise to_http_exception(e) from e

        return transcription.text
