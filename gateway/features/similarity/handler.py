import math
from typing import Any, Dict, Sequence

from fastapi import Depends

from gateway.dependencies import get_config, get_provider_client
from gateway.features.embeddings.handler import EMBEDDINGS_PATH, fetch_embeddings
from gateway.services.provider_client import ProviderClient
from gateway.shared.config import logger
from gateway.shared.errors import ProviderError, ProviderShapeError, to_http_exception

from .command import SimilarityRequest, SimilarityResponse


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors of equal length."""
    if len(a) != len(b) or not a:
        raise ValueError("vectors must be non-empty and of equal length")
    dot_product = sum(x * y for x, y in zip(a, b))
    magnitude_a = math.sqrt(sum(x * x for x in a))
    magnitude_b = math.sqrt(sum(y * y for y in b))
    if magnitude_a == 0 or magnitude_b == 0:
        raise ValueError("cannot compare a zero vector")
    return dot_product / (magnitude_a * magnitude_b)


def similarity_score(similarity: float) -> int:
    """Maps a cosine in [-1, 1] onto a 0..100 score, rounding halves up."""
    score = math.floor(similarity * 50.0 + 50.0 + 0.5)
    return max(0, min(100, score))


class SimilarityHandler:
    """
    Scores how close a guess is to a prompt by comparing their embeddings.
    Both texts are embedded in a single provider call.
    """

    def __init__(
        self,
        provider_client: ProviderClient = Depends(get_provider_client),
        config: Dict[str, Any] = Depends(get_config),
    ):
        self._client = provider_client
        self._model = config["provider"]["embedding_model"]

    async def handle(self, request: SimilarityRequest) -> SimilarityResponse:
        try:
            embeddings = await fetch_embeddings(self._client, self._model, [request.prompt, request.guess])
            if len(embeddings.data) < 2:
                logger.error("Expected 2 embeddings from provider, got %d", len(embeddings.data))
                raise ProviderShapeError()
            try:
                similarity = cosine_similarity(embeddings.data[0].embedding, embeddings.data[1].embedding)
            except ValueError as e:
                logger.error("Cannot score embeddings from %s: %s", EMBEDDINGS_PATH, e)
                raise ProviderShapeError() from e
        except ProviderError as e:
            raise to_http_exception(e) from e

        return SimilarityResponse(score=similarity_score(similarity))
