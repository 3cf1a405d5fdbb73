from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from .command import GenerateImageRequest
from .handler import GenerateImageHandler

router = APIRouter()

@router.post("/generate_image", response_class=PlainTextResponse)
async def generate_image(
    image_request: GenerateImageRequest,
    handler: GenerateImageHandler = Depends(GenerateImageHandler)
) -> PlainTextResponse:
    return PlainTextResponse(await handler.handle(image_request))
