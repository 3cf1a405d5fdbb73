# gateway/features/generate_chat/handler.py
from fastapi import Depends

from gateway.dependencies import get_provider_client
from gateway.services.provider_client import ProviderClient
from gateway.shared.config import logger
from gateway.shared.errors import ProviderError, to_http_exception

from .command import ChatCompletion, GenerateChatRequest

CHAT_COMPLETIONS_PATH = "/chat/completions"


class GenerateChatHandler:
    def __init__(self, provider_client: ProviderClient = Depends(get_provider_client)):
        self._client = provider_client

    async def handle(self, request: GenerateChatRequest) -> str:
        """Returns the content of the first generated message."""
        logger.info(
            "Forwarding chat request for model '%s' with %d messages.",
            request.model, len(request.messages),
        )
        try:
            completion = await self._client.post_json(
                CHAT_COMPLETIONS_PATH, request.model_dump(), ChatCompletion
            )
        except ProviderError as e:
            raise to_http_exception(e) from e

        return completion.choices[0].message.content
