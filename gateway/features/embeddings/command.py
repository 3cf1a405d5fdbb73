from pydantic import BaseModel, ConfigDict, Field
from typing import List


class EmbeddingsRequest(BaseModel):
    model: str = Field(min_length=1)
    input: List[str] = Field(min_length=1)


class Embedding(BaseModel):
    model_config = ConfigDict(extra="allow")

    embedding: List[float]


class EmbeddingList(BaseModel):
    """
    Provider embeddings response. Fields the gateway does not read are
    kept so the body can be returned as received.
    """
    model_config = ConfigDict(extra="allow")

    data: List[Embedding] = Field(min_length=1)
