"""Raw media export from the container."""

import posixpath
import shutil
import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO

import structlog

from pptx_index.extraction.errors import MediaExportError

logger = structlog.get_logger(__name__)


def media_filename(path: str) -> str:
    """Get the base filename a media entry is exported under."""
    return posixpath.basename(path)


def export_media(path: str, source: BinaryIO, output_dir: str | Path) -> Path:
    """Copy a media entry's bytes to ``<output_dir>/<base filename>``.

    An existing file with the same name is overwritten, so two entries that
    share a base filename leave only the last one written.

    Args:
        path: Entry path, e.g. ``ppt/media/image1.png``.
        source: Readable binary stream of the entry.
        output_dir: Existing, writable output directory.

    Returns:
        Path of the written file.

    Raises:
        MediaExportError: If the entry cannot be read or the file written.
    """
    filename = media_filename(path)
    if not filename:
        raise MediaExportError(path)

    destination = Path(output_dir) / filename
    try:
        with open(destination, "wb") as target:
            shutil.copyfileobj(source, target)
    except (OSError, zipfile.BadZipFile, zlib.error, EOFError) as e:
        raise MediaExportError(path, e) from e

    logger.debug("Exported media", entry=path, destination=str(destination))
    return destination
