"""Explicit locale record passed into the viewer and export engine.

The viewer never reads a global language setting. Callers build a
``ViewerLocale`` once (usually from ``Settings.viewer.language``) and hand
it to the session, template builder and converters.

Label resolution belongs to the caller; the tables below are the defaults
used when no other mapping is supplied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

Direction: TypeAlias = Literal["ltr", "rtl"]

_DIRECTIONS: dict[str, Direction] = {"en": "ltr", "fa": "rtl"}

SUPPORTED_LANGUAGES = frozenset(_DIRECTIONS)

DEFAULT_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "docTitle": "Legal Document",
        "title": "Generated Document",
        "headerDate": "Date",
        "headerCaseNo": "Case No.",
        "caseNoPlaceholder": "__________",
        "export": "Export",
        "copy": "Copy text",
        "downloadMD": "Download Markdown (.md)",
        "downloadDOCX": "Download Word (.docx)",
        "downloadHTML": "Download HTML (.html)",
        "printPDF": "Print / Save as PDF",
        "sendToSupport": "Send to support for review",
        "shareWhatsApp": "Share via WhatsApp",
        "shareEmail": "Share via email",
        "search": "Search...",
        "generating": "Generating...",
        "placeholder1": "Your document will appear here",
        "placeholder2": "Fill in the form and press generate to start.",
        "sharePrefix": "Please find the legal document details below:",
        "supportPrefix": "Hello, please review this AI-generated document:",
        "copied": "Copied to clipboard",
    },
    "fa": {
        "docTitle": "سند حقوقی",
        "title": "سند تولید شده",
        "headerDate": "تاریخ",
        "headerCaseNo": "شماره پرونده",
        "caseNoPlaceholder": "__________",
        "export": "خروجی",
        "copy": "کپی متن",
        "downloadMD": "دانلود Markdown (.md)",
        "downloadDOCX": "دانلود Word (.docx)",
        "downloadHTML": "دانلود HTML (.html)",
        "printPDF": "چاپ / ذخیره PDF",
        "sendToSupport": "ارسال برای بررسی پشتیبانی",
        "shareWhatsApp": "اشتراک در واتساپ",
        "shareEmail": "اشتراک با ایمیل",
        "search": "جستجو...",
        "generating": "در حال تولید...",
        "placeholder1": "سند شما اینجا نمایش داده می‌شود",
        "placeholder2": "فرم را پر کنید و دکمه تولید را بزنید.",
        "sharePrefix": "لطفا جزئیات سند حقوقی را در ادامه ببینید:",
        "supportPrefix": "سلام، لطفا این سند تولید شده توسط هوش مصنوعی را بررسی کنید:",
        "copied": "در کلیپ‌بورد کپی شد",
    },
}


def gregorian_to_jalali(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Convert a Gregorian date to the Solar Hijri (Jalali) calendar.

    Arithmetic 33-year-cycle conversion; exact for 1800-2200.
    """
    cumulative = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
    gy2 = year + 1 if month > 2 else year
    days = (
        355666
        + 365 * year
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + day
        + cumulative[month - 1]
    )
    jy = -1595 + 33 * (days // 12053)
    days %= 12053
    jy += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365
    if days < 186:
        return jy, 1 + days // 31, 1 + days % 31
    return jy, 7 + (days - 186) // 30, 1 + (days - 186) % 30


@dataclass(frozen=True)
class ViewerLocale:
    """Language, text direction and labels for one viewer session."""

    language: str
    direction: Direction
    labels: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def for_language(
        cls, language: str, labels: Mapping[str, str] | None = None
    ) -> ViewerLocale:
        """Build the locale record for a supported language code.

        Raises:
            ValueError: If the language is not supported.
        """
        if language not in _DIRECTIONS:
            msg = f"Unsupported language: {language!r}"
            raise ValueError(msg)
        return cls(
            language=language,
            direction=_DIRECTIONS[language],
            labels=labels if labels is not None else DEFAULT_LABELS[language],
        )

    @property
    def is_rtl(self) -> bool:
        return self.direction == "rtl"

    def label(self, key: str) -> str:
        """Return the label for *key*, or the key itself when missing."""
        return self.labels.get(key, key)

    def format_date(self, value: date) -> str:
        """Format a date the way the browser does for this locale.

        ``en`` follows en-US (``M/D/YYYY``); ``fa`` follows
        fa-IR-u-nu-latn (Solar Hijri ``YYYY/M/D`` with Latin digits).
        """
        if self.language == "fa":
            jy, jm, jd = gregorian_to_jalali(value.year, value.month, value.day)
            return f"{jy}/{jm}/{jd}"
        return f"{value.month}/{value.day}/{value.year}"
