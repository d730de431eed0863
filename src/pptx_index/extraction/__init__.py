"""Extraction pipeline: archive walking, resolution, and aggregation."""

from pptx_index.extraction.aggregator import ResultAggregator, merge_page
from pptx_index.extraction.archive_walker import (
    ArchiveEntry,
    ArchiveWalker,
    EntryRoute,
    WalkStats,
    classify_entry,
    extract_document,
    iter_archive_entries,
)
from pptx_index.extraction.errors import (
    ArchiveOpenError,
    EntryReadError,
    ExtractionError,
    MediaExportError,
    MissingPageNumberError,
    OutputWriteError,
    RelationshipParseError,
    SerializationError,
)
from pptx_index.extraction.models import (
    DocumentIndex,
    PageCategory,
    PageRecord,
    PageUpdate,
)

__all__ = [
    "ArchiveEntry",
    "ArchiveWalker",
    "EntryRoute",
    "WalkStats",
    "classify_entry",
    "extract_document",
    "iter_archive_entries",
    "ResultAggregator",
    "merge_page",
    "DocumentIndex",
    "PageCategory",
    "PageRecord",
    "PageUpdate",
    "ExtractionError",
    "ArchiveOpenError",
    "EntryReadError",
    "MediaExportError",
    "MissingPageNumberError",
    "OutputWriteError",
    "RelationshipParseError",
    "SerializationError",
]
