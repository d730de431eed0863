"""Page-addressable text and image index for PowerPoint containers."""

from pptx_index.extraction import (
    DocumentIndex,
    PageCategory,
    PageRecord,
    extract_document,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DocumentIndex",
    "PageCategory",
    "PageRecord",
    "extract_document",
]
