"""Local configuration for jgmenu-ob."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_ROOT_MENU = "root-menu"
DEFAULT_MENU_FILE = "~/.config/openbox/menu.xml"
DEFAULT_PIPE_HELPER = "jgmenu_run ob"

# Id of the tag that jgmenu opens first.
JGMENU_OB_ROOT_MENU = os.getenv("JGMENU_OB_ROOT_MENU", DEFAULT_ROOT_MENU)
JGMENU_OB_MENU_FILE = Path(os.getenv("JGMENU_OB_MENU_FILE", DEFAULT_MENU_FILE)).expanduser()
# Command jgmenu runs to expand a ^pipe() entry at menu-open time.
JGMENU_OB_PIPE_HELPER = os.getenv("JGMENU_OB_PIPE_HELPER", DEFAULT_PIPE_HELPER)
