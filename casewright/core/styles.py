"""Closed set of output case styles and their formatting policies."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

__all__ = [
    'CaseStyle',
    'InvalidStyleError',
    'STYLE_FORMATTERS',
    'resolve_style',
    'style_names',
]


class CaseStyle(str, Enum):
    KEBAB = 'kebab'
    CAMEL = 'camel'
    PASCAL = 'pascal'
    SNAKE = 'snake'
    DOT = 'dot'
    CONSTANT = 'constant'
    TRAIN = 'train'
    PATH = 'path'
    TITLE = 'title'


class InvalidStyleError(ValueError):
    """Raised when a style selector does not name a known CaseStyle."""

    def __init__(self, style: Any, message: Optional[str] = None):
        self.style = style
        super().__init__(
            message or f"Unknown case style {style!r}. Valid styles: {', '.join(style_names())}"
        )


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _camel(words: Sequence[str]) -> str:
    if not words:
        return ''
    return words[0].lower() + ''.join(_capitalize(w) for w in words[1:])


# Word casing is always recomputed; input casing is never carried through.
STYLE_FORMATTERS: Dict[CaseStyle, Callable[[Sequence[str]], str]] = {
    CaseStyle.KEBAB: lambda words: '-'.join(w.lower() for w in words),
    CaseStyle.CAMEL: _camel,
    CaseStyle.PASCAL: lambda words: ''.join(_capitalize(w) for w in words),
    CaseStyle.SNAKE: lambda words: '_'.join(w.lower() for w in words),
    CaseStyle.DOT: lambda words: '.'.join(w.lower() for w in words),
    CaseStyle.CONSTANT: lambda words: '_'.join(w.upper() for w in words),
    CaseStyle.TRAIN: lambda words: '-'.join(_capitalize(w) for w in words),
    CaseStyle.PATH: lambda words: '/'.join(w.lower() for w in words),
    CaseStyle.TITLE: lambda words: ' '.join(_capitalize(w) for w in words),
}

_ALIASES: Dict[Tuple[str, ...], CaseStyle] = {
    ('screaming', 'snake'): CaseStyle.CONSTANT,
    ('upper', 'camel'): CaseStyle.PASCAL,
    ('lower', 'camel'): CaseStyle.CAMEL,
}

_NAME_SEPARATORS = ('', '-', '_', '.', '/', ' ')


def style_names() -> List[str]:
    return [s.value for s in CaseStyle]


def _build_spellings() -> Dict[str, CaseStyle]:
    # Every accepted spelling, lowercased: words joined by one separator,
    # with or without a trailing "case" word.
    named: List[Tuple[Tuple[str, ...], CaseStyle]] = [((s.value,), s) for s in CaseStyle]
    named.extend(_ALIASES.items())
    spellings: Dict[str, CaseStyle] = {}
    for words, member in named:
        for parts in (words, words + ('case',)):
            for sep in _NAME_SEPARATORS:
                spellings[sep.join(parts)] = member
    return spellings


_SPELLINGS = _build_spellings()


def resolve_style(style: Any) -> CaseStyle:
    """Return the CaseStyle selected by ``style``.

    Accepts a CaseStyle member or its name, optionally followed by "case",
    with the words run together or joined by one of - _ . / or a space
    ('kebab', 'kebab-case', 'camelCase', 'CONSTANT_CASE', 'dot.case').
    Anything else raises InvalidStyleError; there is no fallback style.
    """
    if isinstance(style, CaseStyle):
        return style
    if not isinstance(style, str):
        raise InvalidStyleError(style)
    member = _SPELLINGS.get(style.strip(' ').lower())
    if member is None:
        raise InvalidStyleError(style)
    return member
