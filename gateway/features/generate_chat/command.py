from pydantic import BaseModel, Field
from typing import List, Literal


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class GenerateChatRequest(BaseModel):
    model: str = Field(min_length=1)
    messages: List[ChatMessage] = Field(min_length=1)


class CompletionMessage(BaseModel):
    content: str


class CompletionChoice(BaseModel):
    message: CompletionMessage


class ChatCompletion(BaseModel):
    """
    Subset of the provider's chat completion that the gateway consumes.
    """
    choices: List[CompletionChoice] = Field(min_length=1)
