"""Archive walking and per-entry dispatch.

Every entry of the container is visited once, in archive order, and routed
by its path prefix:

- ``ppt/media/`` entries are copied to the output directory
- ``ppt/slides/_rels/`` and ``ppt/slideMasters/_rels/`` entries feed image
  lists for slides and slide masters
- other ``ppt/slides/`` entries feed slide text runs

Per-entry failures are logged and the walk moves on.
"""

import functools
import zipfile
import zlib
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

import structlog

from pptx_index.extraction.aggregator import INDEX_FILENAME, ResultAggregator
from pptx_index.extraction.errors import (
    PER_ENTRY_ERRORS,
    ArchiveOpenError,
    EntryReadError,
    MediaExportError,
)
from pptx_index.extraction.media_exporter import export_media
from pptx_index.extraction.models import DocumentIndex, PageCategory, PageUpdate
from pptx_index.extraction.relationships import resolve_image_relationships
from pptx_index.extraction.text_extractor import extract_texts

logger = structlog.get_logger(__name__)

MEDIA_PREFIX = "ppt/media/"
SLIDE_RELS_PREFIX = "ppt/slides/_rels/"
MASTER_RELS_PREFIX = "ppt/slideMasters/_rels/"
SLIDE_PREFIX = "ppt/slides/"

# Errors zipfile raises while opening or inflating a member.
_READ_ERRORS = (OSError, zipfile.BadZipFile, zlib.error, EOFError, RuntimeError)


class EntryRoute(Enum):
    """Where an archive entry is sent."""

    MEDIA = "media"
    SLIDE_RELS = "slide_rels"
    MASTER_RELS = "master_rels"
    SLIDE = "slide"
    IGNORED = "ignored"


# Order matters: the slide rels directory sits inside the slide directory.
ROUTING_RULES: tuple[tuple[str, EntryRoute], ...] = (
    (MEDIA_PREFIX, EntryRoute.MEDIA),
    (SLIDE_RELS_PREFIX, EntryRoute.SLIDE_RELS),
    (MASTER_RELS_PREFIX, EntryRoute.MASTER_RELS),
    (SLIDE_PREFIX, EntryRoute.SLIDE),
)


def classify_entry(path: str) -> EntryRoute:
    """Route an entry path by the first matching directory prefix."""
    for prefix, route in ROUTING_RULES:
        if path.startswith(prefix):
            return route
    return EntryRoute.IGNORED


@dataclass
class ArchiveEntry:
    """One record of the container: its path and a way to open its bytes."""

    path: str
    is_dir: bool
    open: Callable[[], BinaryIO]

    def read_bytes(self) -> bytes:
        """Read the entry's full content.

        Raises:
            EntryReadError: If the entry cannot be opened or inflated.
        """
        try:
            with self.open() as handle:
                return handle.read()
        except _READ_ERRORS as e:
            raise EntryReadError(self.path, e) from e

    def read_text(self, encoding: str = "utf-8") -> str:
        """Read and decode the entry's content.

        Raises:
            EntryReadError: If the entry cannot be read or decoded.
        """
        content = self.read_bytes()
        try:
            return content.decode(encoding)
        except UnicodeDecodeError as e:
            raise EntryReadError(self.path, e) from e


def iter_archive_entries(archive: zipfile.ZipFile) -> Iterator[ArchiveEntry]:
    """Yield the entries of an open ZIP archive in archive order."""
    for info in archive.infolist():
        yield ArchiveEntry(
            path=info.filename,
            is_dir=info.is_dir(),
            open=functools.partial(archive.open, info),
        )


@dataclass
class WalkStats:
    """Counters for one walk over a container."""

    entries: int = 0
    media_exported: int = 0
    slide_updates: int = 0
    master_updates: int = 0
    ignored: int = 0
    failed: int = 0


class ArchiveWalker:
    """Dispatch archive entries to the extraction components."""

    def __init__(self, aggregator: ResultAggregator, output_dir: str | Path):
        """Initialize walker.

        Args:
            aggregator: Receives page updates from relationship and slide entries.
            output_dir: Existing directory media entries are exported to.
        """
        self.aggregator = aggregator
        self.output_dir = Path(output_dir)

    def walk(self, entries: Iterable[ArchiveEntry]) -> WalkStats:
        """Process every entry, logging and skipping per-entry failures.

        Args:
            entries: Archive entries in archive order.

        Returns:
            WalkStats for the run.
        """
        stats = WalkStats()

        for entry in entries:
            if entry.is_dir:
                continue
            stats.entries += 1

            try:
                route = self.process_entry(entry)
            except PER_ENTRY_ERRORS as e:
                stats.failed += 1
                logger.error(
                    "Failed to process entry",
                    entry=entry.path,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                continue

            if route is EntryRoute.MEDIA:
                stats.media_exported += 1
            elif route is EntryRoute.MASTER_RELS:
                stats.master_updates += 1
            elif route is EntryRoute.IGNORED:
                stats.ignored += 1
            else:
                stats.slide_updates += 1

        return stats

    def process_entry(self, entry: ArchiveEntry) -> EntryRoute:
        """Route one file entry to its component.

        Args:
            entry: A non-directory archive entry.

        Returns:
            The route the entry took.

        Raises:
            MediaExportError: Media could not be exported.
            RelationshipParseError: Relationship document is malformed.
            MissingPageNumberError: Path carries no page number.
            EntryReadError: Entry could not be read or decoded.
        """
        route = classify_entry(entry.path)

        if route is EntryRoute.MEDIA:
            self._export(entry)
        elif route is EntryRoute.SLIDE_RELS:
            self._resolve(entry, PageCategory.SLIDE)
        elif route is EntryRoute.MASTER_RELS:
            self._resolve(entry, PageCategory.MASTER)
        elif route is EntryRoute.SLIDE:
            self._extract_texts(entry)
        else:
            logger.debug("Ignoring entry", entry=entry.path)

        return route

    def _export(self, entry: ArchiveEntry) -> None:
        try:
            source = entry.open()
        except _READ_ERRORS as e:
            raise MediaExportError(entry.path, e) from e

        with source:
            export_media(entry.path, source, self.output_dir)

    def _resolve(self, entry: ArchiveEntry, category: PageCategory) -> None:
        page_number, targets = resolve_image_relationships(entry.read_bytes(), entry.path)
        self.aggregator.apply(
            PageUpdate(
                category=category,
                page_number=page_number,
                images=list(targets.values()),
            )
        )

    def _extract_texts(self, entry: ArchiveEntry) -> None:
        page_number, texts = extract_texts(entry.read_text(), entry.path)
        self.aggregator.apply(
            PageUpdate(
                category=PageCategory.SLIDE,
                page_number=page_number,
                texts=texts,
            )
        )


def extract_document(
    input_file: str | Path,
    output_dir: str | Path,
    index_filename: str = INDEX_FILENAME,
) -> DocumentIndex:
    """Build the index for one presentation and write it to ``output_dir``.

    Args:
        input_file: Path to the ``.pptx`` container.
        output_dir: Existing, writable output directory.
        index_filename: Name of the index file written into ``output_dir``.

    Returns:
        The completed DocumentIndex.

    Raises:
        ArchiveOpenError: The container cannot be opened.
        SerializationError: The index cannot be encoded.
        OutputWriteError: The index cannot be written.
    """
    input_path = Path(input_file)
    logger.info("Starting extraction", input_file=str(input_path), output_dir=str(output_dir))

    try:
        archive = zipfile.ZipFile(input_path)
    except (OSError, zipfile.BadZipFile) as e:
        raise ArchiveOpenError(str(input_path), e) from e

    aggregator = ResultAggregator(title=input_path.name)
    walker = ArchiveWalker(aggregator, output_dir)

    with archive:
        stats = walker.walk(iter_archive_entries(archive))

    logger.info(
        "Extraction complete",
        input_file=str(input_path),
        entries=stats.entries,
        media_exported=stats.media_exported,
        slide_updates=stats.slide_updates,
        master_updates=stats.master_updates,
        ignored=stats.ignored,
        failed=stats.failed,
    )

    aggregator.write_index(output_dir, index_filename)
    return aggregator.index
