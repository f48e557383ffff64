"""Derive SQLAlchemy table names from declarative class names.

This module provides:

- tablename_for: table name for a class or a bare name, in a case style.
- CaseTablenameMixin: declarative mixin that fills in ``__tablename__``.

Example
-------
::

    class Base(DeclarativeBase):
        pass

    class UserAccount(CaseTablenameMixin, Base):
        id = mapped_column(Integer, primary_key=True)

    UserAccount.__table__.name == 'user_account'
"""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import declared_attr

from ..core.convert import convert
from ..core.styles import CaseStyle

__all__ = ['tablename_for', 'CaseTablenameMixin']

logger = logging.getLogger(__name__)


def tablename_for(cls_or_name: Any, style: Any = CaseStyle.SNAKE) -> str:
    """Return the table name for a model class (by ``__name__``) or a string.

    Raises ValueError when no words are left to build a name from.
    """
    name = cls_or_name if isinstance(cls_or_name, str) else getattr(cls_or_name, '__name__', None)
    table_name = convert(name, style)
    if not table_name:
        raise ValueError(f"Cannot derive a table name from {cls_or_name!r}")
    logger.debug(f"Derived table name {table_name!r} from {name!r}")
    return table_name


class CaseTablenameMixin:
    """Mixin for declarative models: ``__tablename__`` from the class name.

    Override ``__tablename_style__`` on the model to pick another style.
    An explicit ``__tablename__`` on the model still wins.
    """

    __tablename_style__ = CaseStyle.SNAKE

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return tablename_for(cls, cls.__tablename_style__)
