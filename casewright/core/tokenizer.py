"""Split identifier-like text into words.

The tokenizer is lenient: anything that is not a string, or a string with no
letters or digits left after cleaning, yields an empty tuple. It never raises.

Boundaries are found by an ordered list of rules (``BOUNDARY_RULES``). Each
rule rewrites the whole string, marking word boundaries with a single space,
before the next rule runs. Only then is the string split and every candidate
stripped of anything that is not an ASCII letter or digit.
"""
from __future__ import annotations

import re
import string
from typing import Any, Callable, List, Tuple

__all__ = ['Word', 'TokenSequence', 'BOUNDARY_RULES', 'tokenize']

Word = str
TokenSequence = Tuple[Word, ...]

_BOUNDARY = ' '

_case_transition = re.compile(r'([a-z0-9])([A-Z])')
_punctuation_run = re.compile(
    '[' + re.escape(string.punctuation.replace('-', '').replace('_', '')) + ']+'
)
_separator_run = re.compile(r'[\s_\-]+')
_not_alnum = re.compile(r'[^A-Za-z0-9]')


def _mark_case_transitions(text: str) -> str:
    # Capital runs (XMLHttp) are left alone: only lower/digit -> upper splits.
    return _case_transition.sub(r'\1' + _BOUNDARY + r'\2', text)


def _mark_punctuation(text: str) -> str:
    return _punctuation_run.sub(_BOUNDARY, text)


def _collapse_separators(text: str) -> str:
    return _separator_run.sub(_BOUNDARY, text)


BOUNDARY_RULES: Tuple[Callable[[str], str], ...] = (
    _mark_case_transitions,
    _mark_punctuation,
    _collapse_separators,
)


def _clean(candidate: str) -> str:
    return _not_alnum.sub('', candidate)


def tokenize(value: Any) -> TokenSequence:
    """Return the words of ``value`` in left-to-right order.

    >>> tokenize('firstName')
    ('first', 'Name')
    >>> tokenize('  multiple   separators---here__')
    ('multiple', 'separators', 'here')
    >>> tokenize(None)
    ()
    """
    if not isinstance(value, str) or not value:
        return ()
    text = value
    for rule in BOUNDARY_RULES:
        text = rule(text)
    words: List[Word] = []
    for candidate in text.split(_BOUNDARY):
        cleaned = _clean(candidate)
        if cleaned:
            words.append(cleaned)
    return tuple(words)
