from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DoubanSubject(BaseModel):
    """One entry of the ``subjects`` array returned by Douban's search endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    cover: str = ""
    rate: str = ""

    @field_validator("id", "title", "cover", "rate", mode="before")
    @classmethod
    def _coerce_str(cls, value):
        # Douban sends ids as strings but has been seen emitting numbers / nulls
        if value is None:
            return ""
        return str(value)


class CatalogItem(BaseModel):
    """Normalized catalog entry returned to clients."""

    id: str
    title: str
    poster: str
    rate: str
    year: str = ""


class CatalogResult(BaseModel):
    code: int
    message: str
    # wire name expected by clients; typing.List since "list" is rebound in this scope
    list: List[CatalogItem] = Field(default_factory=lambda: [])


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
