"""Interpret an Openbox menu tree into a jgmenu menu model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable

from bs4.element import NavigableString, PageElement, Tag

from jgmenu_ob.config import JGMENU_OB_ROOT_MENU
from jgmenu_ob.schemas import (
    CheckoutItem,
    CommandItem,
    MenuItem,
    MenuModel,
    MenuTag,
    PipeMenuItem,
    SeparatorItem,
)
from jgmenu_ob.xml_utils import is_text_node

logger = logging.getLogger(__name__)

# Openbox pipe-menus don't wrap their first level in <menu></menu>.
PIPE_MENU_WRAPPER = "openbox_pipe_menu"

# Built-in actions that carry no <command> payload.
_SPECIAL_ACTIONS = {
    "reconfigure": "openbox --reconfigure",
    "restart": "openbox --restart",
}


@dataclass(frozen=True)
class _ActionScope:
    """Position of a node relative to ``item > action > command`` ancestors.

    Element names are matched case-sensitively. ``menu`` elements never
    enter the scope, so ``<item><menu><action>`` still counts as an action.
    """

    progress: int = 0
    in_action: bool = False
    in_command: bool = False

    def enter(self, name: str) -> _ActionScope:
        if name == "item":
            return replace(self, progress=1)
        if name == "action" and self.progress == 1:
            return replace(self, progress=2, in_action=True)
        if name == "command" and self.progress == 2:
            return replace(self, progress=0, in_command=True)
        return replace(self, progress=0)


class MenuInterpreter:
    """Walk an Openbox menu tree and collect tags and items.

    The interpreter keeps two cursors while walking: the tag that new items
    are appended to and the item that nested action nodes fill in.
    """

    def __init__(self, root_id: str = JGMENU_OB_ROOT_MENU) -> None:
        self.root_id = root_id
        self.model = MenuModel()
        self._current_tag: int | None = None
        self._current_item: MenuItem | None = None

    def interpret(self, root: Tag) -> MenuModel:
        """Walk ``root`` and its subtree, returning the populated model."""
        self._walk([root], _ActionScope())
        return self.model

    def _walk(self, nodes: Iterable[PageElement], scope: _ActionScope) -> None:
        for node in nodes:
            if isinstance(node, NavigableString):
                if is_text_node(node):
                    self._process_text(str(node), scope)
                continue
            if not isinstance(node, Tag):
                continue

            name = node.name.lower()
            if name == "menu":
                opened = self._start_menu(node)
                self._walk(list(node.children), scope)
                if opened:
                    self._revert_to_parent()
                continue
            if name == "comment":
                continue

            child_scope = scope.enter(node.name)
            if name == "item":
                self._append_item(CommandItem(label=node.get("label")))
            elif name == "separator":
                self._append_item(SeparatorItem(label=node.get("label")))
            else:
                self._process_action(node, child_scope)
            self._walk(list(node.children), child_scope)

    # <menu> elements can be three things:
    #  - a submenu with a label (and usually an id): gets its own tag
    #  - a pipe-menu: has execute (and usually a label)
    #  - a link to a menu defined elsewhere: has an id only
    def _start_menu(self, node: Tag) -> bool:
        label = node.get("label")
        execute = node.get("execute")
        menu_id = node.get("id")

        if label is not None and execute is None:
            self._new_tag(node)
            return True
        if execute is not None:
            self._append_item(PipeMenuItem(label=label, command=execute))
        elif menu_id is not None:
            target_label = self.model.label_for(menu_id)
            if target_label is None:
                logger.debug("Checkout of %r resolves to an empty label", menu_id)
            self._append_item(CheckoutItem(label=target_label, target=menu_id))
        return False

    def _new_tag(self, node: Tag | None) -> None:
        label = node.get("label") if node is not None else None
        menu_id = node.get("id") if node is not None else None
        tag = MenuTag(
            label=label,
            id=menu_id if menu_id is not None else self.root_id,
            parent=self._find_parent_tag(node),
        )
        self._current_tag = self.model.add_tag(tag)

        parent = self.model.parent_of(tag)
        if parent is not None and tag.id != self.root_id:
            checkout = CheckoutItem(label=label, target=tag.id)
            parent.items.append(checkout)
            self._current_item = checkout

    def _find_parent_tag(self, node: Tag | None) -> int | None:
        if node is None or node.parent is None:
            return None
        if node.parent.name == PIPE_MENU_WRAPPER:
            parent_id = self.root_id
        else:
            parent_id = node.parent.get("id")
        return self.model.find_tag(parent_id)

    def _revert_to_parent(self) -> None:
        if self._current_tag is None:
            return
        parent = self.model.tags[self._current_tag].parent
        if parent is not None:
            self._current_tag = parent

    def _append_item(self, item: MenuItem) -> None:
        if self._current_tag is None:
            logger.debug("Item before any menu; creating %r tag", self.root_id)
            self._new_tag(None)
        self.model.tags[self._current_tag].items.append(item)
        self._current_item = item

    def _process_text(self, text: str, scope: _ActionScope) -> None:
        if scope.in_command:
            # <command>...</command>, joined onto one CSV line
            self._set_command("".join(text.splitlines()).strip())

    def _process_action(self, node: Tag, scope: _ActionScope) -> None:
        # Catch <action name="Reconfigure"> and <action name="Restart">
        if not scope.in_action:
            return
        action = node.get("name")
        if action is None or action.lower() == "execute":
            return
        command = _SPECIAL_ACTIONS.get(action.lower())
        if command is not None:
            self._set_command(command)

    def _set_command(self, command: str) -> None:
        item = self._current_item
        if not isinstance(item, CommandItem):
            logger.debug("Ignoring command %r outside of an <item>", command)
            return
        item.command = command


def interpret_menu(root: Tag, root_id: str = JGMENU_OB_ROOT_MENU) -> MenuModel:
    """Build a menu model from the root element of an Openbox menu document."""
    return MenuInterpreter(root_id).interpret(root)
