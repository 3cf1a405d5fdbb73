from pydantic import BaseModel, Field
from typing import List, Literal

ImageSize = Literal["256x256", "512x512", "1024x1024", "1792x1024", "1024x1792"]
ImageQuality = Literal["standard", "hd"]


class GenerateImageRequest(BaseModel):
    model: str = Field(min_length=1)
    prompt: str = Field(min_length=1)
    size: ImageSize
    quality: ImageQuality
    n: int = Field(ge=1, le=10)


class GeneratedImage(BaseModel):
    url: str


class ImageGeneration(BaseModel):
    data: List[GeneratedImage] = Field(min_length=1)
