from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    # Validated as a URL, kept exactly as submitted.
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Please enter a valid URL for the image.")
    return value


ImageUrl = Annotated[str, AfterValidator(_check_http_url)]


class VlogPostCreate(BaseModel):
    title: str = Field(min_length=5, max_length=200)
    author: str = Field(min_length=2, max_length=100)
    content: str = Field(min_length=50)
    featured_image_url: Optional[ImageUrl] = None

    @field_validator("featured_image_url", mode="before")
    @classmethod
    def _blank_url_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class VlogPostOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: str
    content: str
    featured_image_url: Optional[str] = None
    slug: str
    created_at: datetime
    updated_at: datetime
