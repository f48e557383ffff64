from __future__ import annotations

from .name_converter import GRAPHQL_SAFE_STYLES, CaseNameConverter, UnsupportedGraphQLStyleError

__all__ = ['CaseNameConverter', 'GRAPHQL_SAFE_STYLES', 'UnsupportedGraphQLStyleError']
