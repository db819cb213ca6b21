"""Command-line entry point: print an Openbox menu as jgmenu CSV."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from jgmenu_ob.config import JGMENU_OB_PIPE_HELPER, JGMENU_OB_ROOT_MENU
from jgmenu_ob.conversion import build_menu_model
from jgmenu_ob.exceptions import JgmenuObError, UsageError
from jgmenu_ob.serializer import write_menu
from jgmenu_ob.source import load_menu_source

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jgmenu-ob",
        description="Convert an Openbox menu (or pipe-menu output) to jgmenu CSV.",
    )
    parser.add_argument(
        "--tag",
        default=JGMENU_OB_ROOT_MENU,
        help=f"Id of the root tag (default: {JGMENU_OB_ROOT_MENU})",
    )
    parser.add_argument("--cmd", help="Pipe-menu command whose output is converted")
    parser.add_argument(
        "--pipe-helper",
        default=JGMENU_OB_PIPE_HELPER,
        help=f"Command used in ^pipe() entries (default: {JGMENU_OB_PIPE_HELPER})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "file",
        nargs="?",
        help="Openbox menu file (default: ~/.config/openbox/menu.xml)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="jgmenu-ob: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.file is not None and argv[-1] != args.file:
            raise UsageError("<file> must be the last argument")
        path = Path(args.file) if args.file is not None else None
        markup = load_menu_source(path=path, command=args.cmd)
        model = build_menu_model(markup, args.tag)
    except JgmenuObError as exc:
        logger.error("%s", exc)
        return 1

    write_menu(model, sys.stdout, args.tag, pipe_helper=args.pipe_helper)
    return 0


if __name__ == "__main__":
    sys.exit(main())
