from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from .base import FrozenModel


class ArticleInput(FrozenModel):
    """Request body for /analyze; also one entry of a batch."""
    text: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("text", "title", "url", "image_url", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def ingested_from(self) -> str:
        if self.text:
            return "text"
        if self.url:
            return "url"
        if self.image_url:
            return "image"
        return "text"

    def has_content(self) -> bool:
        return bool(self.text or self.url or self.image_url)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Miracle cure found",
                "text": "SHOCKING: doctors hate this one weird trick!"
            }
        }
    )


class BatchRequest(FrozenModel):
    articles: List[ArticleInput] = Field(default_factory=list)


class HighlightsRequest(FrozenModel):
    text: str = ""


class EvidenceRequest(FrozenModel):
    query: Optional[str] = None
    title: Optional[str] = None
