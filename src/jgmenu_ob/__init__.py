"""jgmenu-ob: convert Openbox menus into jgmenu CSV."""

from jgmenu_ob.conversion import build_menu_model, convert_menu
from jgmenu_ob.exceptions import JgmenuObError, ParseError, SourceError, UsageError
from jgmenu_ob.interpreter import MenuInterpreter, interpret_menu
from jgmenu_ob.schemas import (
    CheckoutItem,
    CommandItem,
    MenuModel,
    MenuTag,
    PipeMenuItem,
    SeparatorItem,
)
from jgmenu_ob.serializer import escape_label, render_menu, write_menu

__all__ = [
    "CheckoutItem",
    "CommandItem",
    "JgmenuObError",
    "MenuInterpreter",
    "MenuModel",
    "MenuTag",
    "ParseError",
    "PipeMenuItem",
    "SeparatorItem",
    "SourceError",
    "UsageError",
    "build_menu_model",
    "convert_menu",
    "escape_label",
    "interpret_menu",
    "render_menu",
    "write_menu",
]
