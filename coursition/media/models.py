"""Media parse request and subtitle data types."""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, model_validator


class UrlMediaRequest(BaseModel):
    """Parse media the engine can fetch from a URL."""
    url: str = Field(min_length=1)
    language: str = Field(min_length=1)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def source(self) -> str:
        return self.url

    @property
    def source_kind(self) -> str:
        return "url"


class FileMediaRequest(BaseModel):
    """Parse media uploaded with the request."""
    content: bytes
    filename: Optional[str] = None
    language: str = Field(min_length=1)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def source(self) -> str:
        return "file"

    @property
    def source_kind(self) -> str:
        return "file"


ParseMediaRequest = Union[UrlMediaRequest, FileMediaRequest]


class SubtitleSegment(BaseModel):
    start: float = Field(ge=0)
    end: float
    text: str

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _end_after_start(self) -> "SubtitleSegment":
        if self.end <= self.start:
            raise ValueError(
                f"segment end ({self.end}) must be greater than start ({self.start})"
            )
        return self


class MediaResponse(BaseModel):
    """Parse result. Serialized as ``{"json": [...]}``."""
    segments: List[SubtitleSegment] = Field(default_factory=list, alias="json")

    model_config = {"populate_by_name": True}
