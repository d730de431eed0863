"""Data models for the presentation index."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PageCategory(Enum):
    """Page categories, valued by their key in the serialized index."""

    SLIDE = "slides"
    MASTER = "masters"

    @property
    def is_master(self) -> bool:
        return self is PageCategory.MASTER


@dataclass
class PageRecord:
    """Content extracted for one slide or slide master."""

    page_number: int  # 1-indexed, from the entry filename
    is_master: bool = False
    images: list[str] = field(default_factory=list)
    texts: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "page_no": self.page_number,
            "slide_master": self.is_master,
            "images": list(self.images),
            "texts": list(self.texts),
        }


@dataclass(frozen=True)
class PageUpdate:
    """Partial content for one page produced by a single archive entry.

    A field left as None is not touched when the update is merged.
    """

    category: PageCategory
    page_number: int
    images: list[str] | None = None
    texts: list[str] | None = None


@dataclass
class DocumentIndex:
    """Aggregate result for one presentation."""

    title: str
    slides: dict[int, PageRecord] = field(default_factory=dict)
    masters: dict[int, PageRecord] = field(default_factory=dict)

    def pages_for(self, category: PageCategory) -> dict[int, PageRecord]:
        """Get the page mapping for a category."""
        if category is PageCategory.MASTER:
            return self.masters
        return self.slides

    @property
    def total_pages(self) -> int:
        return len(self.slides) + len(self.masters)

    def to_dict(self) -> dict[str, Any]:
        """Build the external representation.

        Page numbers become string keys, emitted in ascending numeric order.
        """
        return {
            "doc_title": self.title,
            "pages": {
                category.value: {
                    str(number): record.to_dict()
                    for number, record in sorted(self.pages_for(category).items())
                }
                for category in (PageCategory.SLIDE, PageCategory.MASTER)
            },
        }
