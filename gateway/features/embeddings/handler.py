from typing import Any, Dict, List

from fastapi import Depends

from gateway.dependencies import get_provider_client
from gateway.services.provider_client import ProviderClient
from gateway.shared.config import logger
from gateway.shared.errors import ProviderError, to_http_exception

from .command import EmbeddingList, EmbeddingsRequest

EMBEDDINGS_PATH = "/embeddings"


async def fetch_embeddings(client: ProviderClient, model: str, inputs: List[str]) -> EmbeddingList:
    return await client.post_json(EMBEDDINGS_PATH, {"model": model, "input": inputs}, EmbeddingList)


class EmbeddingsHandler:
    def __init__(self, provider_client: ProviderClient = Depends(get_provider_client)):
        self._client = provider_client

    async def handle(self, request: EmbeddingsRequest) -> Dict[str, Any]:
        logger.info("Forwarding embeddings request for model '%s' with %d inputs.", request.model, len(request.input))
        try:
            embeddings = await fetch_embeddings(self._client, request.model, request.input)
        except ProviderError as e:
            raise to_http_exception(e) from e

        return embeddings.model_dump()
