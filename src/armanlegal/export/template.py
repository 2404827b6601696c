"""Standalone HTML export document.

Every templated export target (Word, HTML file, print) starts from the
``ExportDocument`` built here: a brand header, the locale-formatted date,
a case-number placeholder and the rendered body, laid out left-to-right or
right-to-left by the active locale.

The body is always rendered from the original document text. Search
highlighting never reaches an export.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from armanlegal.errors import ExportConversionError, RenderConversionError
from armanlegal.viewer.render import render_markdown

if TYPE_CHECKING:
    from armanlegal.locale import ViewerLocale

logger = logging.getLogger(__name__)

PAGE_STYLES = """
    .document-page { background-color: #ffffff; color: #111827; padding: 2.5rem; box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05); max-width: 8.5in; min-height: 10in; margin: 0 auto; font-family: 'Vazirmatn', -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; line-height: 1.8; }
    .document-header { display: flex; justify-content: space-between; align-items: flex-start; border-bottom: 2px solid #e5e7eb; padding-bottom: 1rem; margin-bottom: 2rem; }
    .document-logo { display: flex; align-items: center; gap: 0.75rem; }
    .document-logo svg { height: 50px; width: auto; }
    .document-logo span { font-size: 1.125rem; font-weight: 700; color: #374151; }
    .document-header-info { text-align: right; font-size: 0.875rem; color: #4b5563; }
    [dir="rtl"] .document-header-info { text-align: left; }
    .document-body { color: #111827; max-width: none; }
    .document-body h1, .document-body h2, .document-body h3, .document-body h4 { color: #111827; }
    .document-body p, .document-body li { color: #374151; line-height: 2; }
    [dir="rtl"] .document-body { text-align: right; }
    [dir="rtl"] .document-body p, [dir="rtl"] .document-body li { text-align: justify; }
    .document-body h1, .document-body h2 { border-bottom: 1px solid #eee; padding-bottom: 0.3em; }
    .document-body code { font-family: monospace; background-color: #f4f4f4; padding: 0.2em 0.4em; border-radius: 3px; }
    .document-body pre { background-color: #f4f4f4; padding: 1em; border-radius: 5px; overflow-x: auto; text-align: left; direction: ltr; }
    .document-body pre code { background-color: transparent; padding: 0; }
    .document-body table { border-collapse: collapse; width: 100%; margin: 1em 0; }
    .document-body th, .document-body td { border: 1px solid #ddd; padding: 8px; }
    [dir="ltr"] .document-body td { text-align: left; }
    [dir="rtl"] .document-body td { text-align: right; }
    .document-body th { background-color: #f2f2f2; }
    .document-body blockquote { color: #666; margin: 0; padding-inline-start: 1em; border-inline-start: 0.25em solid #dfe2e5; }
    .document-body ul { padding-inline-start: 20px; }
    .document-body mark { background-color: #fde047; padding: 2px 1px; border-radius: 2px; color: inherit; }
    .document-body mark.current-match { background-color: #f97316; color: white; }
"""

# Standalone export only; the live viewer is embedded in the app page.
DOCUMENT_STYLES = (
    """
    body { background-color: #f3f4f6; padding: 2rem; margin: 0; color: #111827; }
    body[dir="rtl"] { direction: rtl; }
"""
    + PAGE_STYLES
)

BRAND_SVG = (
    '<svg width="64" height="64" viewBox="0 0 64 64" fill="none" '
    'xmlns="http://www.w3.org/2000/svg"><rect width="64" height="64" '
    'fill="#002279"/><path d="M32 12V20M32 20H18C16.8954 20 16 20.8954 16 '
    "22V24C16 25.1046 16.8954 26 18 26H32M32 20H46C47.1046 20 48 20.8954 48 "
    "22V24C48 25.1046 47.1046 26 46 26H32M18 26L22 48M46 26L42 48M14 52H50\" "
    'stroke="#D3B574" stroke-width="2.5"/></svg>'
)

_HEADER_TEMPLATE = """<div class="document-header">
      <div class="document-logo">
        {logo}
        <span>{brand}</span>
      </div>
      <div class="document-header-info">
        <p><strong>{date_label}:</strong> {date}</p>
        <p><strong>{case_label}:</strong> {case_placeholder}</p>
      </div>
    </div>"""

_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}" dir="{dir}">
<head>
  <meta charset="UTF-8">
  <meta name="generated-at" content="{generated_at}">
  <title>{title}</title>
  <style>{styles}</style>
</head>
<body dir="{dir}">
  <div class="document-page">
    {header}
    <div class="document-body">
{body}
    </div>
  </div>
</body>
</html>
"""


@dataclass(frozen=True)
class ExportDocument:
    """Templated, highlight-free document shared by all export targets."""

    html: str
    body_html: str
    language: str
    direction: str
    generated_at: datetime


def build_header_html(locale: ViewerLocale, brand_name: str, day: date) -> str:
    """Brand mark, date and case-number block shown above the body."""
    return _HEADER_TEMPLATE.format(
        logo=BRAND_SVG,
        brand=html.escape(brand_name),
        date_label=html.escape(locale.label("headerDate")),
        date=locale.format_date(day),
        case_label=html.escape(locale.label("headerCaseNo")),
        case_placeholder=html.escape(locale.label("caseNoPlaceholder")),
    )


def build_export_document(
    text: str,
    locale: ViewerLocale,
    *,
    brand_name: str,
    now: datetime | None = None,
) -> ExportDocument:
    """Wrap the rendered document text in the export template.

    Args:
        text: Original (unhighlighted) document text.
        locale: Language, direction and labels.
        brand_name: Name shown beside the brand mark.
        now: Generation time; defaults to the current time.

    Returns:
        The complete export document.

    Raises:
        ExportConversionError: If the body cannot be rendered.
    """
    generated_at = now or datetime.now(UTC)
    try:
        body = render_markdown(text)
    except RenderConversionError as exc:
        logger.exception("Export template: body rendering failed")
        raise ExportConversionError(
            "template", "The document could not be prepared for export."
        ) from exc

    document = _DOCUMENT_TEMPLATE.format(
        lang=locale.language,
        dir=locale.direction,
        generated_at=generated_at.isoformat(),
        title=html.escape(locale.label("docTitle")),
        styles=DOCUMENT_STYLES,
        header=build_header_html(locale, brand_name, generated_at.date()),
        body=body,
    )
    return ExportDocument(
        html=document,
        body_html=body,
        language=locale.language,
        direction=locale.direction,
        generated_at=generated_at,
    )
