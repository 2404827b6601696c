"""Export of finished documents.

One template (``build_export_document``) feeds every templated target;
clipboard and markdown export use the raw text.
"""

from armanlegal.export.converters import (
    ExportFile,
    clipboard_text,
    email_share_url,
    html_file,
    markdown_file,
    print_script,
    support_share_url,
    whatsapp_share_url,
)
from armanlegal.export.docx import (
    DocxConverted,
    DocxFailed,
    convert_html_to_docx,
    get_export_dir,
    pandoc_available,
    remove_export_dir,
)
from armanlegal.export.template import ExportDocument, build_export_document

__all__ = [
    "DocxConverted",
    "DocxFailed",
    "ExportDocument",
    "ExportFile",
    "build_export_document",
    "clipboard_text",
    "convert_html_to_docx",
    "email_share_url",
    "html_file",
    "markdown_file",
    "get_export_dir",
    "pandoc_available",
    "remove_export_dir",
    "print_script",
    "support_share_url",
    "whatsapp_share_url",
]
