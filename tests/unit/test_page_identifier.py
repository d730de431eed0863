"""Unit tests for page number lookup."""

import pytest

from pptx_index.extraction.errors import MissingPageNumberError
from pptx_index.extraction.page_identifier import page_number_from_path


class TestPageNumberFromPath:
    """Tests for page_number_from_path."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("ppt/slides/slide1.xml", 1),
            ("ppt/slides/slide12.xml", 12),
            ("ppt/slides/slide07.xml", 7),
            ("ppt/slideMasters/slideMaster3.xml", 3),
        ],
    )
    def test_reads_digit_run(self, path, expected):
        """The digits after the keyword are the page number."""
        assert page_number_from_path(path) == expected

    def test_relationship_paths_resolve(self):
        """Rels sidecars carry the page number of the part they describe."""
        assert page_number_from_path("ppt/slides/_rels/slide4.xml.rels") == 4
        assert page_number_from_path("ppt/slideMasters/_rels/slideMaster2.xml.rels") == 2

    def test_keyword_does_not_pick_category(self):
        """A master-style name resolves the same way as a slide name."""
        assert page_number_from_path("ppt/slides/slideMaster5.xml") == 5

    @pytest.mark.parametrize(
        "path",
        [
            "ppt/slides/slide.xml",
            "ppt/slides/notes1.xml",
            "ppt/slides/slide1.png",
            "ppt/theme/theme1.xml",
            "",
        ],
    )
    def test_missing_page_number_raises(self, path):
        """Paths without a page number raise MissingPageNumberError."""
        with pytest.raises(MissingPageNumberError) as exc_info:
            page_number_from_path(path)

        assert exc_info.value.path == path

    def test_directory_names_are_not_matched(self):
        """Only the filename is searched for the page number."""
        with pytest.raises(MissingPageNumberError):
            page_number_from_path("ppt/slide1.xml/extra.bin")
