"""Text run extraction from slide markup."""

import re

import structlog

from pptx_index.extraction.page_identifier import page_number_from_path

logger = structlog.get_logger(__name__)

# DrawingML text run; inner text is kept verbatim, entities and all.
TEXT_RUN_PATTERN = re.compile(r"<a:t>(.*?)</a:t>", re.DOTALL)


def find_text_runs(content: str) -> list[str]:
    """Return the inner text of every ``<a:t>`` run in document order."""
    return TEXT_RUN_PATTERN.findall(content)


def extract_texts(content: str, path: str) -> tuple[int, list[str]]:
    """Extract the text runs of a slide.

    Args:
        content: Decoded slide XML.
        path: Entry path, e.g. ``ppt/slides/slide1.xml``.

    Returns:
        Tuple of (page number, text runs). A slide without runs yields an
        empty list.

    Raises:
        MissingPageNumberError: If the path carries no page number.
    """
    page_number = page_number_from_path(path)
    texts = find_text_runs(content)

    logger.debug("Extracted slide text", entry=path, page_number=page_number, runs=len(texts))
    return page_number, texts
