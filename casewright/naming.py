"""One-call naming helpers (DRY consolidation).

Each helper is ``convert(value, <style>)``. They replace the separate
kebab/camel/dot converters that used to disagree on separators and acronyms;
all of them now share one tokenizer.
"""
from __future__ import annotations

from typing import Any

from .core.convert import convert
from .core.styles import CaseStyle

__all__ = [
    'to_kebab',
    'to_camel',
    'to_pascal',
    'to_snake',
    'to_dot',
    'to_constant',
    'to_train',
    'to_path',
    'to_title',
    'camel_to_snake',
    'snake_to_camel',
]


def to_kebab(value: Any) -> str:
    """``'firstName'`` -> ``'first-name'``."""
    return convert(value, CaseStyle.KEBAB)


def to_camel(value: Any) -> str:
    """``'hello_world'`` -> ``'helloWorld'``."""
    return convert(value, CaseStyle.CAMEL)


def to_pascal(value: Any) -> str:
    return convert(value, CaseStyle.PASCAL)


def to_snake(value: Any) -> str:
    return convert(value, CaseStyle.SNAKE)


def to_dot(value: Any) -> str:
    """``'hello world'`` -> ``'hello.world'``."""
    return convert(value, CaseStyle.DOT)


def to_constant(value: Any) -> str:
    return convert(value, CaseStyle.CONSTANT)


def to_train(value: Any) -> str:
    return convert(value, CaseStyle.TRAIN)


def to_path(value: Any) -> str:
    return convert(value, CaseStyle.PATH)


def to_title(value: Any) -> str:
    return convert(value, CaseStyle.TITLE)


def camel_to_snake(name: Any) -> str:
    """Convert camelCase or PascalCase identifier to snake_case.

    Idempotent for already snake_case input. Sequences of capitals stay one
    word: 'HTTPServer' -> 'httpserver'.
    """
    return to_snake(name)


def snake_to_camel(name: Any, upper_first: bool = False) -> str:
    """Convert snake_case identifier to camelCase or PascalCase.

    upper_first=False returns lowerCamelCase (default), True returns UpperCamelCase.
    """
    return to_pascal(name) if upper_first else to_camel(name)
