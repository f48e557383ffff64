from __future__ import annotations

from typing import Any

from .formatter import format_words
from .styles import resolve_style
from .tokenizer import tokenize

__all__ = ['convert']


def convert(value: Any, style: Any) -> str:
    """Convert ``value`` to ``style``.

    Degenerate input (None, non-strings, blank or symbol-only text) gives ''.
    An unknown style raises InvalidStyleError regardless of the input.
    """
    case_style = resolve_style(style)
    return format_words(tokenize(value), case_style)
