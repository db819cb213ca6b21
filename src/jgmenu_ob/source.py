"""Acquire Openbox menu documents from files or pipe-menu commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from jgmenu_ob import config
from jgmenu_ob.exceptions import SourceError, UsageError

logger = logging.getLogger(__name__)


def default_menu_path() -> Path:
    """Return the menu file used when neither a file nor a command is given."""
    return config.JGMENU_OB_MENU_FILE


def read_menu_file(path: Path) -> bytes:
    """Read a menu.xml file.

    Raises:
        SourceError: If the file cannot be opened.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        raise SourceError(f"cannot open file '{path}'") from exc


def run_menu_command(command: str) -> bytes:
    """Run an Openbox pipe-menu command through the shell and capture its output.

    A non-zero exit status is logged but the output is still used, since
    pipe-menu scripts often exit non-zero after printing a valid menu.

    Raises:
        SourceError: If the command cannot be started.
    """
    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise SourceError(f"cannot run command '{command}'") from exc

    if result.returncode != 0:
        logger.warning(
            "Command %r exited with status %d: %s",
            command,
            result.returncode,
            result.stderr.decode("utf-8", errors="replace").strip(),
        )
    return result.stdout


def load_menu_source(*, path: Path | None = None, command: str | None = None) -> bytes:
    """Load a menu document from a command, a file, or the default menu file.

    Raises:
        UsageError: If both ``path`` and ``command`` are given.
        SourceError: If the source cannot be read.
    """
    if path is not None and command is not None:
        raise UsageError("both --cmd=<cmd> and <file> provided")
    if command is not None:
        logger.debug("Reading menu from command %r", command)
        return run_menu_command(command)
    if path is None:
        path = default_menu_path()
        logger.debug("Reading default menu file %s", path)
        try:
            return read_menu_file(path)
        except SourceError as exc:
            raise SourceError("cannot open openbox menu file") from exc
    return read_menu_file(path)
