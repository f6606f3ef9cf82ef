"""Tests for file-size, exhibit-label and name formatting helpers."""

import pytest

from petitionkit.utils.formatting import exhibit_label, format_file_size, truncate_name


class TestFormatFileSize:
    """Tests for binary-scaled size formatting."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 Bytes"),
            (1, "1 Bytes"),
            (1023, "1023 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1126, "1.1 KB"),
            (2_500_000, "2.38 MB"),
            (3 * 1024**3, "3 GB"),
            (5 * 1024**4, "5120 GB"),
        ],
    )
    def test_sizes(self, size: int, expected: str) -> None:
        assert format_file_size(size) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_file_size(-1)


class TestExhibitLabel:
    """Tests for alphabetic exhibit labels."""

    def test_single_letters(self) -> None:
        assert [exhibit_label(i) for i in range(3)] == ["A", "B", "C"]
        assert exhibit_label(25) == "Z"

    def test_continues_past_z(self) -> None:
        assert exhibit_label(26) == "AA"
        assert exhibit_label(27) == "AB"
        assert exhibit_label(51) == "AZ"
        assert exhibit_label(52) == "BA"
        assert exhibit_label(701) == "ZZ"
        assert exhibit_label(702) == "AAA"

    def test_labels_unique(self) -> None:
        labels = [exhibit_label(i) for i in range(1000)]
        assert len(set(labels)) == 1000

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            exhibit_label(-1)


class TestTruncateName:
    """Tests for document-name truncation in the exhibits table."""

    def test_short_name_unchanged(self) -> None:
        assert truncate_name("lease.pdf") == "lease.pdf"

    def test_thirty_characters_unchanged(self) -> None:
        name = "a" * 30
        assert truncate_name(name) == name

    def test_long_name_truncated(self) -> None:
        name = "a" * 27 + "bcdefgh"
        assert truncate_name(name) == "a" * 27 + "..."
