from __future__ import annotations

from .convert import convert
from .formatter import format_words
from .styles import CaseStyle, InvalidStyleError, STYLE_FORMATTERS, resolve_style, style_names
from .tokenizer import BOUNDARY_RULES, TokenSequence, Word, tokenize

__all__ = [
    'convert',
    'format_words',
    'tokenize',
    'CaseStyle',
    'InvalidStyleError',
    'STYLE_FORMATTERS',
    'BOUNDARY_RULES',
    'TokenSequence',
    'Word',
    'resolve_style',
    'style_names',
]
