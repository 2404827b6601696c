"""Literal, case-insensitive search over the document text.

The query is free text typed by the user. It is always escaped before it
reaches the regex engine, so ``(a+)*`` finds the six characters ``(a+)*``
and nothing else.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Match:
    """A single search hit.

    Attributes:
        offset: Start character index in the document text (inclusive).
        length: Number of characters matched.
    """

    offset: int
    length: int

    @property
    def end(self) -> int:
        """End character index (exclusive)."""
        return self.offset + self.length


def find_matches(text: str, query: str) -> tuple[Match, ...]:
    """Find every non-overlapping occurrence of *query* in *text*.

    Scanning is left-to-right and resumes after each consumed match, so
    ``"aaa"`` searched for ``"aa"`` yields one match, not two.

    Args:
        text: Document text to search.
        query: User-entered substring; may be empty.

    Returns:
        Matches sorted ascending by offset. Empty when the query is empty
        or longer than the text.
    """
    if not query or not text or len(query) > len(text):
        return ()
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    return tuple(
        Match(offset=m.start(), length=m.end() - m.start())
        for m in pattern.finditer(text)
    )


def match_counter_label(index: int, total: int) -> str:
    """Return the ``"i / N"`` label shown next to the search box."""
    if total == 0:
        return "0 / 0"
    return f"{index + 1} / {total}"
