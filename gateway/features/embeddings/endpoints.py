from typing import Any, Dict

from fastapi import APIRouter, Depends
from .command import EmbeddingsRequest
from .handler import EmbeddingsHandler

router = APIRouter()

@router.post("/embeddings")
async def embeddings(
    embeddings_request: EmbeddingsRequest,
    handler: EmbeddingsHandler = Depends(EmbeddingsHandler)
) -> Dict[str, Any]:
    return await handler.handle(embeddings_request)
