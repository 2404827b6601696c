"""Tests for the explicit locale record."""

from __future__ import annotations

from datetime import date

import pytest

from armanlegal.locale import DEFAULT_LABELS, ViewerLocale, gregorian_to_jalali


class TestViewerLocale:
    def test_persian_is_rtl(self) -> None:
        locale = ViewerLocale.for_language("fa")
        assert locale.direction == "rtl"
        assert locale.is_rtl

    def test_english_is_ltr(self) -> None:
        locale = ViewerLocale.for_language("en")
        assert locale.direction == "ltr"
        assert not locale.is_rtl

    def test_unsupported_language(self) -> None:
        with pytest.raises(ValueError, match="Unsupported language"):
            ViewerLocale.for_language("de")

    def test_default_labels(self) -> None:
        locale = ViewerLocale.for_language("en")
        assert locale.label("docTitle") == "Legal Document"

    def test_custom_labels(self) -> None:
        locale = ViewerLocale.for_language("en", {"docTitle": "Lease"})
        assert locale.label("docTitle") == "Lease"

    def test_missing_label_falls_back_to_key(self) -> None:
        locale = ViewerLocale.for_language("fa", {})
        assert locale.label("export") == "export"

    def test_label_tables_have_same_keys(self) -> None:
        assert DEFAULT_LABELS["en"].keys() == DEFAULT_LABELS["fa"].keys()


class TestDates:
    """Header dates follow the browser's locale formatting."""

    @pytest.mark.parametrize(
        ("gregorian", "jalali"),
        [
            ((2024, 3, 20), (1403, 1, 1)),
            ((2024, 3, 19), (1402, 12, 29)),
            ((2025, 3, 21), (1404, 1, 1)),
            ((2023, 9, 23), (1402, 7, 1)),
            ((2000, 1, 1), (1378, 10, 11)),
        ],
    )
    def test_gregorian_to_jalali(
        self, gregorian: tuple[int, int, int], jalali: tuple[int, int, int]
    ) -> None:
        assert gregorian_to_jalali(*gregorian) == jalali

    def test_persian_format(self) -> None:
        locale = ViewerLocale.for_language("fa")
        assert locale.format_date(date(2024, 3, 20)) == "1403/1/1"

    def test_english_format(self) -> None:
        locale = ViewerLocale.for_language("en")
        assert locale.format_date(date(2024, 3, 20)) == "3/20/2024"
