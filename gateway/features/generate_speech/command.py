from pydantic import BaseModel, Field


class GenerateSpeechRequest(BaseModel):
    model: str = Field(min_length=1)
    input: str = Field(min_length=1)
    voice: str = Field(min_length=1)
