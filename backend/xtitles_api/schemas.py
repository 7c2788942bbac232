"""Pydantic models exposed by the titles API and consumed from the catalog."""
from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

ItemT = TypeVar("ItemT")


class PictureModel(BaseModel):
    """Picture metadata attached to a title."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title_id: str
    name: str = Field(description="Picture identifier without the file suffix.")


class TitleModel(BaseModel):
    """Title record with its pictures."""

    model_config = ConfigDict(from_attributes=True)

    title_id: str
    name: str
    systems: list[str] = Field(default_factory=list)
    bing_id: str = ""
    service_config_id: str | None = None
    pfn: str | None = None
    pictures: list[PictureModel] = Field(default_factory=list)


class Page(BaseModel, Generic[ItemT]):
    """Paginated envelope shared by listing and search responses."""

    items: list[ItemT]
    total: int = Field(description="Number of items matching the request.")
    limit: int
    offset: int
    page: int
    pages: int = Field(description="Total page count, ceil(total / limit).")


class CatalogTitle(BaseModel):
    """Title record as delivered by the remote catalog."""

    title_id: str
    name: str = ""
    systems: list[str] = Field(default_factory=list)
    bing_id: str = ""
    service_config_id: str | None = None
    pfn: str | None = None

    @field_validator("name", "bing_id", mode="before")
    @classmethod
    def _none_as_empty_string(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("systems", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: object) -> object:
        return [] if value is None else value


class CatalogPage(BaseModel):
    """Envelope of a single catalog page."""

    items: list[CatalogTitle] = Field(default_factory=list)
    count: int = 0

    @field_validator("items", mode="before")
    @classmethod
    def _none_as_empty_items(cls, value: object) -> object:
        return [] if value is None else value


class IngestionReport(BaseModel):
    """Outcome of a catalog ingestion run."""

    titles: int = Field(description="Titles persisted, or already present when skipped.")
    pictures: int = Field(description="Pictures persisted, or already present when skipped.")
    skipped: bool = Field(
        default=False, description="True when the store already held titles and nothing ran."
    )


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")
    titles: int = Field(default=0, description="Number of titles currently persisted.")


class StatsModel(BaseModel):
    """Aggregate catalog statistics."""

    titles: int = Field(description="Total number of titles in the catalog.")
    pictures: int = Field(description="Total number of pictures across all titles.")
    titles_with_pictures: int = Field(description="Number of titles owning at least one picture.")
