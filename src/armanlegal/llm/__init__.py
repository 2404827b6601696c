"""Document producer backed by the Claude API."""

from armanlegal.llm.client import DocumentDrafter

__all__ = ["DocumentDrafter"]
