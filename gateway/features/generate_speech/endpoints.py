from fastapi import APIRouter, Depends
from fastapi.responses import Response
from .command import GenerateSpeechRequest
from .handler import GenerateSpeechHandler

router = APIRouter()

@router.post("/generate_speech", response_class=Response)
async def generate_speech(
    speech_request: GenerateSpeechRequest,
    handler: GenerateSpeechHandler = Depends(GenerateSpeechHandler)
) -> Response:
    audio = await handler.handle(speech_request)
    return Response(content=audio, media_type="audio/mpeg")
