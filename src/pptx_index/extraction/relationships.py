"""Image relationship resolution for slide and slide-master rels parts."""

import posixpath

import structlog
from lxml import etree

from pptx_index.extraction.errors import RelationshipParseError
from pptx_index.extraction.page_identifier import page_number_from_path

logger = structlog.get_logger(__name__)

IMAGE_RELATIONSHIP_TYPE = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/image"
)
RELATIONSHIP_TAG = "Relationship"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def parse_relationships(content: bytes, path: str) -> etree._Element:
    """Parse a relationship document.

    Args:
        content: Raw bytes of the ``.rels`` entry.
        path: Entry path, used for error reporting.

    Returns:
        Root element of the document.

    Raises:
        RelationshipParseError: If the document is not well-formed XML.
    """
    try:
        return etree.fromstring(content, parser=_parser())
    except etree.XMLSyntaxError as e:
        raise RelationshipParseError(path, e) from e


def image_targets(root: etree._Element, path: str = "") -> dict[str, str]:
    """Map image relationship ids to target base filenames.

    Elements are visited in document order. An image relationship without an
    ``Id`` or a usable ``Target`` is logged and left out.

    Args:
        root: Parsed ``Relationships`` element.
        path: Entry path, used for log context.

    Returns:
        Insertion-ordered mapping of relationship id to image filename.
    """
    targets: dict[str, str] = {}

    for element in root:
        # Comments and processing instructions
        if not isinstance(element.tag, str):
            continue
        if etree.QName(element).localname != RELATIONSHIP_TAG:
            continue
        if element.get("Type") != IMAGE_RELATIONSHIP_TYPE:
            continue

        rel_id = element.get("Id")
        target = element.get("Target")
        filename = posixpath.basename(target) if target else ""

        if not rel_id or not filename:
            logger.warning(
                "Skipping malformed image relationship",
                entry=path,
                rel_id=rel_id,
                target=target,
            )
            continue

        targets[rel_id] = filename

    return targets


def resolve_image_relationships(content: bytes, path: str) -> tuple[int, dict[str, str]]:
    """Resolve the images referenced by one slide or slide-master rels entry.

    Args:
        content: Raw bytes of the ``.rels`` entry.
        path: Entry path, e.g. ``ppt/slides/_rels/slide1.xml.rels``.

    Returns:
        Tuple of (page number, relationship id -> image filename).

    Raises:
        RelationshipParseError: If the document is not well-formed XML.
        MissingPageNumberError: If the path carries no page number.
    """
    root = parse_relationships(content, path)
    targets = image_targets(root, path)
    page_number = page_number_from_path(path)

    logger.debug(
        "Resolved image relationships",
        entry=path,
        page_number=page_number,
        images=len(targets),
    )
    return page_number, targets
