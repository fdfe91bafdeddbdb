"""Read-only content provider backed by a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from lending.content.models import ContentItem, ContentSection

logger = logging.getLogger(__name__)

_DEFAULT_CONTENT_PATH = Path(__file__).resolve().parents[3] / "config" / "content.yml"


def _parse_section(section_id: str, data: dict[str, Any]) -> ContentSection:
    items = [ContentItem(**item) for item in data.get("items", [])]
    return ContentSection(
        id=section_id,
        title=data.get("title", ""),
        subtitle=data.get("subtitle", ""),
        items=items,
    )


class ContentStore:
    """Serves hero, requirements and services sections to the page layer.

    Sections are loaded once at construction. A missing file yields an
    empty store.
    """

    def __init__(self, content_path: str | Path | None = None) -> None:
        self._path = Path(content_path) if content_path else _DEFAULT_CONTENT_PATH
        self._sections: dict[str, ContentSection] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning("Content file %s not found; serving no sections", self._path)
            return
        with open(self._path) as fh:
            data = yaml.safe_load(fh) or {}
        for section_id, section_data in (data.get("sections") or {}).items():
            self._sections[section_id] = _parse_section(section_id, section_data or {})

    @property
    def section_ids(self) -> list[str]:
        return list(self._sections)

    def get_section(self, section_id: str) -> ContentSection | None:
        return self._sections.get(section_id)

    def list_sections(self) -> list[ContentSection]:
        return list(self._sections.values())
