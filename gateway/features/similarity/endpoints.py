from fastapi import APIRouter, Depends
from .command import SimilarityRequest, SimilarityResponse
from .handler import SimilarityHandler

router = APIRouter()

@router.post("/calculate_similarity", response_model=SimilarityResponse)
async def calculate_similarity(
    similarity_request: SimilarityRequest,
    handler: SimilarityHandler = Depends(SimilarityHandler)
) -> SimilarityResponse:
    return await handler.handle(similarity_request)
