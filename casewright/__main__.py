"""Command line entry point: ``python -m casewright <style> [text ...]``."""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from .config import load_settings
from .core.convert import convert
from .core.styles import InvalidStyleError, resolve_style, style_names

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: python -m casewright <style> [text ...]\n"
    "       python -m casewright --list\n"
    "Converts each text argument (or each line of stdin) to the given style.\n"
    "The style may be omitted when CASEWRIGHT_STYLE is set; an explicit style\n"
    "must then be spelled exactly as listed by --list."
)


def _print_usage() -> None:
    print(USAGE, file=sys.stderr)
    print(f"Styles: {', '.join(style_names())}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args and args[0] in ('-h', '--help'):
        print(USAGE)
        return 0
    if args and args[0] == '--list':
        for name in style_names():
            print(name)
        return 0

    style = settings.default_style
    if args and style is None:
        try:
            style = resolve_style(args[0])
        except InvalidStyleError as e:
            print(str(e), file=sys.stderr)
            return 2
        args = args[1:]
    elif args and args[0] in style_names():
        # With a configured default only an exact style name overrides it;
        # anything else is text.
        style = resolve_style(args[0])
        args = args[1:]
    if style is None:
        _print_usage()
        return 1

    logger.debug(f"Converting to {style.value} ({'arguments' if args else 'stdin'})")
    lines = args if args else (line.rstrip('\r\n') for line in sys.stdin)
    for text in lines:
        print(convert(text, style))
    return 0


if __name__ == '__main__':
    sys.exit(main())
