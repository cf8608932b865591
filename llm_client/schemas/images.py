from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

ImageResponseFormat = Literal["url", "b64_json"]

IMAGE_RESPONSE_FORMATS = ("url", "b64_json")


class ImageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str
    model: Optional[str] = None
    n: Optional[int] = Field(default=None, ge=1)
    quality: Optional[str] = None
    response_format: Optional[ImageResponseFormat] = None
    size: Optional[str] = None
    style: Optional[str] = None
    user: Optional[str] = None


class Image(BaseModel):
    """One generated image, delivered either as a URL or base64 data."""

    model_config = ConfigDict(frozen=True)

    b64_json: Optional[str] = None
    url: Optional[str] = None
    revised_prompt: Optional[str] = None


class Images(BaseModel):
    model_config = ConfigDict(frozen=True)

    created: int
    data: Tuple[Image, ...]
