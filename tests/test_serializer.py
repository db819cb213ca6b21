"""Tests for jgmenu CSV serialization."""

from __future__ import annotations

import io

import pytest

from jgmenu_ob.schemas import (
    CheckoutItem,
    CommandItem,
    MenuModel,
    MenuTag,
    PipeMenuItem,
    SeparatorItem,
)
from jgmenu_ob.serializer import escape_label, render_item, render_menu, write_menu


@pytest.fixture
def model() -> MenuModel:
    """Root tag defined after a submenu, as in many menu.xml files."""
    return MenuModel(
        tags=[
            MenuTag(
                id="apps",
                label="Apps",
                parent=1,
                items=[CommandItem(label="Editor", command="gvim")],
            ),
            MenuTag(
                id="root-menu",
                label="Root",
                items=[
                    CheckoutItem(label="Apps", target="apps"),
                    SeparatorItem(),
                    CommandItem(label="Terminal", command="xterm"),
                ],
            ),
            MenuTag(id="empty", label="Empty", parent=1),
        ]
    )


class TestEscapeLabel:
    """Tests for escape_label function."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Tom & Jerry", "Tom &amp; Jerry"),
            ("a&&b", "a&amp;&amp;b"),
            ("<b>bold</b>", "<b>bold</b>"),
            ("already &amp;", "already &amp;amp;"),
            (None, ""),
            ("", ""),
        ],
    )
    def test_escapes_only_ampersands(self, label: str | None, expected: str) -> None:
        assert escape_label(label) == expected


class TestRenderItem:
    """Tests for render_item function."""

    def test_command(self) -> None:
        assert render_item(CommandItem(label="Web", command="firefox")) == "Web,firefox"

    def test_checkout(self) -> None:
        item = CheckoutItem(label="Games & Fun", target="games")
        assert render_item(item) == "Games &amp; Fun,^checkout(games)"

    def test_unresolved_checkout_has_empty_label(self) -> None:
        assert render_item(CheckoutItem(target="later")) == ",^checkout(later)"

    def test_pipe_keeps_raw_label_in_tag_argument(self) -> None:
        """The label is escaped in the first field only."""
        item = PipeMenuItem(label="Files & Places", command="obpipe --places")

        line = render_item(item, pipe_helper="jgmenu_run ob")

        assert line == (
            "Files &amp; Places,"
            "^pipe(jgmenu_run ob --cmd='obpipe --places' --tag='Files & Places')"
        )

    def test_separator(self) -> None:
        assert render_item(SeparatorItem(label="—")) == "^sep(—)"
        assert render_item(SeparatorItem()) == "^sep()"


class TestRenderMenu:
    """Tests for render_menu and write_menu."""

    def test_root_first_and_empty_tags_skipped(self, model: MenuModel) -> None:
        assert render_menu(model) == (
            "Root,^tag(root-menu)\n"
            "Apps,^checkout(apps)\n"
            "^sep()\n"
            "Terminal,xterm\n"
            "\n"
            "Apps,^tag(apps)\n"
            "Back,^back()\n"
            "Editor,gvim\n"
            "\n"
        )

    def test_custom_root_id(self, model: MenuModel) -> None:
        """Choosing another root id moves that tag to the front."""
        output = render_menu(model, "apps")

        assert output.startswith("Apps,^tag(apps)\nBack,^back()\nEditor,gvim\n\n")
        assert "Root,^tag(root-menu)\n" in output

    def test_empty_model(self) -> None:
        assert render_menu(MenuModel()) == ""

    def test_rendering_is_idempotent(self, model: MenuModel) -> None:
        assert render_menu(model) == render_menu(model)

    def test_tag_label_is_escaped(self) -> None:
        model = MenuModel(
            tags=[MenuTag(id="root-menu", label="A & B", items=[CommandItem(label="x")])]
        )

        assert render_menu(model) == "A &amp; B,^tag(root-menu)\nx,\n\n"

    def test_write_menu(self, model: MenuModel) -> None:
        stream = io.StringIO()

        write_menu(model, stream)

        assert stream.getvalue() == render_menu(model)
