"""Read-only page content (hero, requirements, services) for the lending site."""

from lending.content.models import ContentItem, ContentSection
from lending.content.store import ContentStore

__all__ = ["ContentItem", "ContentSection", "ContentStore"]
