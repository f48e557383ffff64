"""casewright public API and lightweight lazy exports.

The case engine (tokenize, format_words, convert and the naming shortcuts) is
imported eagerly and has no third-party dependencies. The integrations are
resolved on first attribute access so that importing casewright does not
import Strawberry or SQLAlchemy:

- CaseNameConverter, GRAPHQL_SAFE_STYLES (from .gql)
- CaseTablenameMixin, tablename_for (from .sql)
- Settings, load_settings (from .config)
"""
from __future__ import annotations

from .core import (
    CaseStyle,
    InvalidStyleError,
    convert,
    format_words,
    resolve_style,
    style_names,
    tokenize,
)
from .naming import (
    to_camel,
    to_constant,
    to_dot,
    to_kebab,
    to_pascal,
    to_path,
    to_snake,
    to_title,
    to_train,
)

__version__ = '0.1.0'


def __getattr__(name: str):  # PEP 562 lazy exports
    import importlib as _importlib
    if name in {'CaseNameConverter', 'GRAPHQL_SAFE_STYLES'}:
        return getattr(_importlib.import_module(__name__ + '.gql'), name)
    if name in {'CaseTablenameMixin', 'tablename_for'}:
        return getattr(_importlib.import_module(__name__ + '.sql'), name)
    if name in {'Settings', 'load_settings'}:
        return getattr(_importlib.import_module(__name__ + '.config'), name)
    raise AttributeError(name)


__all__ = [
    'CaseStyle', 'InvalidStyleError',
    'tokenize', 'format_words', 'convert', 'resolve_style', 'style_names',
    'to_kebab', 'to_camel', 'to_pascal', 'to_snake', 'to_dot',
    'to_constant', 'to_train', 'to_path', 'to_title',
    'CaseNameConverter', 'GRAPHQL_SAFE_STYLES',
    'CaseTablenameMixin', 'tablename_for',
    'Settings', 'load_settings',
]
