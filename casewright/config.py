"""Environment-driven settings.

Variables (a ``.env`` file in the working directory is read first, without
overriding variables that are already set):

- CASEWRIGHT_STYLE: default style for the command line tool.
- CASEWRIGHT_LOG_LEVEL: logging level name, WARNING by default.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .core.styles import CaseStyle, resolve_style

__all__ = ['Settings', 'load_settings', 'STYLE_ENV', 'LOG_LEVEL_ENV']

STYLE_ENV = 'CASEWRIGHT_STYLE'
LOG_LEVEL_ENV = 'CASEWRIGHT_LOG_LEVEL'


@dataclass(frozen=True)
class Settings:
    default_style: Optional[CaseStyle] = None
    log_level: int = logging.WARNING


def _parse_log_level(raw: Optional[str]) -> int:
    if not raw:
        return logging.WARNING
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid {LOG_LEVEL_ENV} value: {raw!r}")
    return level


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read settings from the environment (and ``env_file`` or ``.env``).

    An invalid CASEWRIGHT_STYLE raises InvalidStyleError rather than being
    ignored.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True), override=False)
    raw_style = os.getenv(STYLE_ENV)
    default_style = resolve_style(raw_style) if raw_style else None
    return Settings(
        default_style=default_style,
        log_level=_parse_log_level(os.getenv(LOG_LEVEL_ENV)),
    )
