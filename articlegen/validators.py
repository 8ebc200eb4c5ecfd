"""Text checks shared by the element types."""

from __future__ import annotations

from typing import Optional


def is_text_empty(text: Optional[str]) -> bool:
    """Return True when the text is missing, empty or whitespace only."""

    if text is None:
        return True
    return not text.strip()


__all__ = ["is_text_empty"]
