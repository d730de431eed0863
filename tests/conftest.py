"""Pytest configuration and fixtures."""

import os
import zipfile
from pathlib import Path

import pytest
import structlog

# Fixed logging settings for every test run
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "console"

IMAGE_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/image"
LAYOUT_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/slideLayout"


def rels_xml(*relationships: tuple[str, str, str]) -> bytes:
    """Build a relationship document from (Id, Type, Target) triples."""
    body = "".join(
        f'<Relationship Id="{rel_id}" Type="{rel_type}" Target="{target}"/>'
        for rel_id, rel_type, target in relationships
    )
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
        '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
        f"{body}</Relationships>"
    ).encode("utf-8")


def slide_xml(*texts: str) -> bytes:
    """Build minimal slide markup with one text run per argument."""
    runs = "".join(f"<a:r><a:t>{text}</a:t></a:r>" for text in texts)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
        '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
        'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
        f"<p:cSld><p:spTree><p:sp><p:txBody><a:p>{runs}</a:p></p:txBody></p:sp>"
        "</p:spTree></p:cSld></p:sld>"
    ).encode("utf-8")


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def build_rels():
    """Relationship document builder."""
    return rels_xml


@pytest.fixture
def build_slide():
    """Slide markup builder."""
    return slide_xml


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Empty output directory."""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def make_pptx(tmp_path):
    """Factory writing a ZIP container from an ordered list of (path, bytes).

    A path ending in "/" is written as a directory entry.
    """

    def _make(entries: list[tuple[str, bytes]], name: str = "deck.pptx") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as archive:
            for entry_path, content in entries:
                if entry_path.endswith("/"):
                    archive.writestr(zipfile.ZipInfo(entry_path), b"")
                else:
                    archive.writestr(entry_path, content)
        return path

    return _make


@pytest.fixture
def sample_entries() -> list[tuple[str, bytes]]:
    """Entries of a small two-slide deck with one slide master."""
    return [
        ("[Content_Types].xml", b"<Types/>"),
        ("ppt/", b""),
        ("ppt/presentation.xml", b"<p:presentation/>"),
        ("ppt/media/", b""),
        ("ppt/media/image1.png", b"\x89PNG image one"),
        ("ppt/media/image2.jpeg", b"\xff\xd8 image two"),
        ("ppt/slides/slide1.xml", slide_xml("Introduction", "Agenda")),
        (
            "ppt/slides/_rels/slide1.xml.rels",
            rels_xml(
                ("rId1", LAYOUT_TYPE, "../slideLayouts/slideLayout1.xml"),
                ("rId2", IMAGE_TYPE, "../media/image1.png"),
            ),
        ),
        (
            "ppt/slides/_rels/slide2.xml.rels",
            rels_xml(("rId3", IMAGE_TYPE, "../media/image2.jpeg")),
        ),
        ("ppt/slides/slide2.xml", slide_xml("Results")),
        ("ppt/slideMasters/slideMaster1.xml", slide_xml("Master title")),
        (
            "ppt/slideMasters/_rels/slideMaster1.xml.rels",
            rels_xml(
                ("rId1", LAYOUT_TYPE, "../slideLayouts/slideLayout1.xml"),
                ("rId9", IMAGE_TYPE, "../media/image1.png"),
            ),
        ),
        ("ppt/theme/theme1.xml", b"<a:theme/>"),
    ]


@pytest.fixture
def sample_pptx(make_pptx, sample_entries) -> Path:
    """A small deck written to disk."""
    return make_pptx(sample_entries)
