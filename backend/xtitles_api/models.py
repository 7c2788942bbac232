"""Database models for the titles API."""
from typing import List, Optional

from sqlalchemy import JSON, Column, ForeignKey, String
from sqlmodel import Field, Relationship, SQLModel


class TitleRecord(SQLModel, table=True):
    """Catalog title persisted during ingestion."""

    __tablename__ = "titles"

    title_id: str = Field(primary_key=True)
    name: str = Field(default="")
    systems: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    bing_id: str = Field(default="")
    service_config_id: Optional[str] = Field(default=None)
    pfn: Optional[str] = Field(default=None)

    pictures: List["PictureRecord"] = Relationship(
        back_populates="title",
        sa_relationship_kwargs={"order_by": "PictureRecord.id"},
    )


class PictureRecord(SQLModel, table=True):
    """Pointer to a picture file stored under the title's folder."""

    __tablename__ = "pictures"

    id: Optional[int] = Field(default=None, primary_key=True)
    title_id: str = Field(
        sa_column=Column(
            String,
            ForeignKey("titles.title_id", onupdate="CASCADE", ondelete="CASCADE"),
            index=True,
            nullable=False,
        )
    )
    name: str

    title: Optional[TitleRecord] = Relationship(back_populates="pictures")
