"""Page number lookup from archive entry paths."""

import posixpath
import re

from pptx_index.extraction.errors import MissingPageNumberError

# Category keyword, digit run, ".xml". Unanchored so "slide3.xml.rels" resolves too.
PAGE_NUMBER_PATTERN = re.compile(r"(slide|slideMaster)(\d+)\.xml")


def page_number_from_path(path: str) -> int:
    """Extract the page number embedded in an entry's filename.

    The keyword only anchors the match; whether the page is a slide or a
    slide master is decided by the caller from the entry's directory.

    Args:
        path: Slash-delimited archive entry path.

    Returns:
        The page number, e.g. 7 for ``ppt/slides/slide07.xml``.

    Raises:
        MissingPageNumberError: If the filename carries no page number.
    """
    match = PAGE_NUMBER_PATTERN.search(posixpath.basename(path))
    if not match:
        raise MissingPageNumberError(path)
    return int(match.group(2))
