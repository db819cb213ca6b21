"""Shared schemas for jgmenu-ob."""

from jgmenu_ob.schemas.menu import (
    CheckoutItem,
    CommandItem,
    MenuItem,
    MenuModel,
    MenuTag,
    PipeMenuItem,
    SeparatorItem,
)

__all__ = [
    "CheckoutItem",
    "CommandItem",
    "MenuItem",
    "MenuModel",
    "MenuTag",
    "PipeMenuItem",
    "SeparatorItem",
]
