from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from .command import GenerateChatRequest
from .handler import GenerateChatHandler

router = APIRouter()

@router.post("/generate_chat", response_class=PlainTextResponse)
async def generate_chat(
    chat_request: GenerateChatRequest,
    handler: GenerateChatHandler = Depends(GenerateChatHandler)
) -> PlainTextResponse:
    return PlainTextResponse(await handler.handle(chat_request))
