from pydantic import BaseModel, Field


class SimilarityRequest(BaseModel):
    prompt: str = Field(min_length=1)
    guess: str = Field(min_length=1)


class SimilarityResponse(BaseModel):
    score: int = Field(ge=0, le=100)
