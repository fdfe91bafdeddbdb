"""Page content models for the marketing site sections."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ContentItem(BaseModel):
    """A single card within a section (a requirement, a service, a hero image)."""

    id: int
    title: str = ""
    description: str = ""
    image_path: str | None = None


class ContentSection(BaseModel):
    """A page section such as the hero, the requirements list or the services list."""

    id: str
    title: str = ""
    subtitle: str = ""
    items: list[ContentItem] = Field(default_factory=list)
