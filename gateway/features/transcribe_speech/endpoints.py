from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse
from .handler import TranscribeSpeechHandler

router = APIRouter()

@router.post("/transcribe_speech", response_class=PlainTextResponse)
async def transcribe_speech(
    file: UploadFile = File(...),
    handler: TranscribeSpeechHandler = Depends(TranscribeSpeechHandler)
) -> PlainTextResponse:
    audio = await file.read()
    return PlainTextResponse(await handler.handle(audio))
