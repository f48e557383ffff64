from __future__ import annotations

from .naming import CaseTablenameMixin, tablename_for

__all__ = ['CaseTablenameMixin', 'tablename_for']
