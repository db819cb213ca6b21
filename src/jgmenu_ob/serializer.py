"""Serialize a menu model into jgmenu's CSV format."""

from __future__ import annotations

from typing import TextIO

from jgmenu_ob.config import JGMENU_OB_PIPE_HELPER, JGMENU_OB_ROOT_MENU
from jgmenu_ob.schemas import (
    CheckoutItem,
    CommandItem,
    MenuItem,
    MenuModel,
    MenuTag,
    PipeMenuItem,
    SeparatorItem,
)


def escape_label(label: str | None) -> str:
    """Escape a label for jgmenu, which may render it as Pango markup."""
    if not label:
        return ""
    return label.replace("&", "&amp;")


def render_menu(
    model: MenuModel,
    root_id: str = JGMENU_OB_ROOT_MENU,
    *,
    pipe_helper: str = JGMENU_OB_PIPE_HELPER,
) -> str:
    """Render the whole menu, root tag first.

    Tags without items are omitted. Every other tag follows in the order it
    was created, each block terminated by a blank line.
    """
    lines: list[str] = []
    for tag in model.tags:
        if tag.id == root_id:
            lines.extend(render_tag(tag, pipe_helper=pipe_helper))
    for tag in model.tags:
        if tag.id != root_id:
            lines.extend(render_tag(tag, pipe_helper=pipe_helper))
    return "".join(f"{line}\n" for line in lines)


def write_menu(
    model: MenuModel,
    stream: TextIO,
    root_id: str = JGMENU_OB_ROOT_MENU,
    *,
    pipe_helper: str = JGMENU_OB_PIPE_HELPER,
) -> None:
    """Write the rendered menu to ``stream``."""
    stream.write(render_menu(model, root_id, pipe_helper=pipe_helper))


def render_tag(tag: MenuTag, *, pipe_helper: str = JGMENU_OB_PIPE_HELPER) -> list[str]:
    if not tag.items:
        return []
    lines = [f"{escape_label(tag.label)},^tag({tag.id})"]
    if tag.parent is not None:
        lines.append("Back,^back()")
    lines.extend(render_item(item, pipe_helper=pipe_helper) for item in tag.items)
    lines.append("")
    return lines


def render_item(item: MenuItem, *, pipe_helper: str = JGMENU_OB_PIPE_HELPER) -> str:
    label = escape_label(item.label)
    if isinstance(item, CommandItem):
        return f"{label},{item.command}"
    if isinstance(item, CheckoutItem):
        return f"{label},^checkout({item.target})"
    if isinstance(item, PipeMenuItem):
        # --tag becomes the root id when jgmenu expands the pipe-menu
        raw_label = item.label or ""
        return f"{label},^pipe({pipe_helper} --cmd='{item.command}' --tag='{raw_label}')"
    if isinstance(item, SeparatorItem):
        return f"^sep({label})"
    raise TypeError(f"Unknown menu item: {item!r}")
