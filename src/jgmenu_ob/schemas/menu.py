"""Menu model built from an Openbox menu tree."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class CommandItem(BaseModel):
    """An entry that runs a shell command."""

    kind: Literal["command"] = "command"
    label: str | None = None
    command: str = ""


class CheckoutItem(BaseModel):
    """An entry that opens another tag in place."""

    kind: Literal["checkout"] = "checkout"
    label: str | None = None
    target: str


class PipeMenuItem(BaseModel):
    """An entry whose contents come from running an Openbox pipe-menu command."""

    kind: Literal["pipe"] = "pipe"
    label: str | None = None
    command: str


class SeparatorItem(BaseModel):
    """A visual divider, optionally labelled."""

    kind: Literal["separator"] = "separator"
    label: str | None = None


MenuItem = Annotated[
    Union[CommandItem, CheckoutItem, PipeMenuItem, SeparatorItem],
    Field(discriminator="kind"),
]


class MenuTag(BaseModel):
    """A named menu section.

    Attributes:
        label: Display name. None for the synthesized pipe-menu root.
        id: Tag identifier referenced by ^tag() and ^checkout().
        parent: Index of the enclosing tag in ``MenuModel.tags``, if any.
        items: Entries in document order.
    """

    label: str | None = None
    id: str
    parent: int | None = None
    items: list[MenuItem] = Field(default_factory=list)


class MenuModel(BaseModel):
    """All tags of a menu, in creation order."""

    tags: list[MenuTag] = Field(default_factory=list)

    def add_tag(self, tag: MenuTag) -> int:
        """Register a tag and return its index."""
        self.tags.append(tag)
        return len(self.tags) - 1

    def find_tag(self, tag_id: str | None) -> int | None:
        """Return the index of the first tag with ``tag_id``."""
        if tag_id is None:
            return None
        for index, tag in enumerate(self.tags):
            if tag.id == tag_id:
                return index
        return None

    def label_for(self, tag_id: str | None) -> str | None:
        index = self.find_tag(tag_id)
        if index is None:
            return None
        return self.tags[index].label

    def parent_of(self, tag: MenuTag) -> MenuTag | None:
        if tag.parent is None:
            return None
        return self.tags[tag.parent]
