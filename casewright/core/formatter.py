from __future__ import annotations

from typing import Any, Sequence

from .styles import STYLE_FORMATTERS, resolve_style

__all__ = ['format_words']


def format_words(words: Sequence[str], style: Any) -> str:
    """Join ``words`` in the given case style.

    The style is checked before anything else, so an unknown style raises
    InvalidStyleError even for an empty word sequence. An empty sequence
    formats to '' in every style.
    """
    case_style = resolve_style(style)
    if not words:
        return ''
    return STYLE_FORMATTERS[case_style](tuple(words))
