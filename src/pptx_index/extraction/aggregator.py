"""Merging per-entry results into the document index."""

import dataclasses
import json
from pathlib import Path

import structlog

from pptx_index.extraction.errors import OutputWriteError, SerializationError
from pptx_index.extraction.models import DocumentIndex, PageRecord, PageUpdate

logger = structlog.get_logger(__name__)

INDEX_FILENAME = "index.json"


def merge_page(existing: PageRecord | None, update: PageUpdate) -> PageRecord:
    """Apply a partial update to a page record.

    Only the fields the update supplies are replaced; the rest are carried
    over from ``existing``. The master flag is fixed when the record is first
    created and never changes afterwards.

    Args:
        existing: Current record for the key, or None if there is none yet.
        update: Images-only or texts-only content for the same key.

    Returns:
        A new PageRecord; ``existing`` is not modified.
    """
    if existing is None:
        existing = PageRecord(
            page_number=update.page_number,
            is_master=update.category.is_master,
        )

    images = update.images if update.images is not None else existing.images
    texts = update.texts if update.texts is not None else existing.texts

    return dataclasses.replace(existing, images=list(images), texts=list(texts))


class ResultAggregator:
    """Owns the DocumentIndex for one run and merges updates into it."""

    def __init__(self, title: str):
        """Initialize aggregator.

        Args:
            title: Input file base name, used as the document title.
        """
        self.index = DocumentIndex(title=title)

    def apply(self, update: PageUpdate) -> PageRecord:
        """Merge an update into the record keyed by (category, page number).

        Args:
            update: Partial page content.

        Returns:
            The merged record now held by the index.
        """
        pages = self.index.pages_for(update.category)
        record = merge_page(pages.get(update.page_number), update)
        pages[update.page_number] = record
        return record

    def serialize(self) -> str:
        """Serialize the index as pretty-printed JSON.

        Raises:
            SerializationError: If the index cannot be encoded.
        """
        try:
            return json.dumps(self.index.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(self.index.title, e) from e

    def write_index(self, output_dir: str | Path, filename: str = INDEX_FILENAME) -> Path:
        """Write the serialized index to ``<output_dir>/<filename>``.

        Args:
            output_dir: Existing, writable output directory.
            filename: Index file name.

        Returns:
            Path of the written index.

        Raises:
            SerializationError: If the index cannot be encoded.
            OutputWriteError: If the file cannot be written.
        """
        payload = self.serialize()
        index_path = Path(output_dir) / filename

        try:
            index_path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(index_path), e) from e

        logger.info(
            "Wrote document index",
            path=str(index_path),
            slides=len(self.index.slides),
            masters=len(self.index.masters),
        )
        return index_path
