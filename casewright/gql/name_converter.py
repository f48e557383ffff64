"""Strawberry name converter backed by the case engine.

Usage::

    schema = strawberry.Schema(
        query=Query,
        config=StrawberryConfig(name_converter=CaseNameConverter(CaseStyle.PASCAL)),
    )
"""
from __future__ import annotations

import logging
from typing import Any

from strawberry.schema.name_converter import NameConverter

from ..core.convert import convert
from ..core.styles import CaseStyle, InvalidStyleError, resolve_style

__all__ = ['CaseNameConverter', 'GRAPHQL_SAFE_STYLES', 'UnsupportedGraphQLStyleError']

logger = logging.getLogger(__name__)

# Styles whose output matches the GraphQL name grammar /[_A-Za-z][_0-9A-Za-z]*/
# (modulo a leading digit, which only comes from a leading-digit input).
GRAPHQL_SAFE_STYLES = frozenset({
    CaseStyle.CAMEL,
    CaseStyle.PASCAL,
    CaseStyle.SNAKE,
    CaseStyle.CONSTANT,
})


class UnsupportedGraphQLStyleError(InvalidStyleError):
    """Raised for a known case style whose output is not a valid GraphQL name."""

    def __init__(self, style: CaseStyle):
        safe = [s.value for s in CaseStyle if s in GRAPHQL_SAFE_STYLES]
        super().__init__(
            style,
            f"Case style {style.value!r} cannot name GraphQL fields. Use one of: {', '.join(safe)}",
        )


class CaseNameConverter(NameConverter):
    """Name schema fields and arguments in the given case style.

    - 'first_name' -> 'firstName' (camel, default)
    - 'first_name' -> 'FirstName' (pascal)
    Names that convert to nothing (e.g. '_') keep their Python spelling.
    """

    def __init__(self, style: Any = CaseStyle.CAMEL):
        case_style = resolve_style(style)
        if case_style not in GRAPHQL_SAFE_STYLES:
            raise UnsupportedGraphQLStyleError(case_style)
        self.style = case_style
        super().__init__(auto_camel_case=case_style is CaseStyle.CAMEL)

    def apply_naming_config(self, name: str) -> str:
        converted = convert(name, self.style)
        if not converted:
            logger.warning(f"Name {name!r} has no words to convert to {self.style.value}; keeping it as is")
            return name
        return converted
