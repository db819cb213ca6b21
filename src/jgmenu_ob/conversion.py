"""Conversion pipeline for Openbox menu XML -> jgmenu CSV."""

from __future__ import annotations

from jgmenu_ob.config import JGMENU_OB_PIPE_HELPER, JGMENU_OB_ROOT_MENU
from jgmenu_ob.interpreter import interpret_menu
from jgmenu_ob.schemas import MenuModel
from jgmenu_ob.serializer import render_menu
from jgmenu_ob.xml_utils import parse_menu_document


def build_menu_model(markup: str | bytes, root_id: str = JGMENU_OB_ROOT_MENU) -> MenuModel:
    """Parse an Openbox menu document and interpret it into a menu model.

    Raises:
        ParseError: If the document cannot be parsed.
    """
    root = parse_menu_document(markup)
    return interpret_menu(root, root_id)


def convert_menu(
    markup: str | bytes,
    *,
    root_id: str = JGMENU_OB_ROOT_MENU,
    pipe_helper: str = JGMENU_OB_PIPE_HELPER,
) -> str:
    """Convert an Openbox menu document into jgmenu CSV.

    Args:
        markup: Contents of a menu.xml file or of a pipe-menu's output.
        root_id: Id of the tag jgmenu opens first.
        pipe_helper: Command used in ^pipe() entries to expand pipe-menus.

    Returns:
        The jgmenu CSV text. Nothing is produced if parsing fails.

    Raises:
        ParseError: If the document cannot be parsed.
    """
    model = build_menu_model(markup, root_id)
    return render_menu(model, root_id, pipe_helper=pipe_helper)
