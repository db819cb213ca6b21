"""Test setup for jgmenu-ob."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


OPENBOX_MENU_XML = """<?xml version="1.0" encoding="UTF-8"?>
<openbox_menu xmlns="http://openbox.org/3.4/menu">
  <menu id="apps-menu" label="Applications">
    <item label="Firefox">
      <action name="Execute">
        <command>firefox</command>
      </action>
    </item>
  </menu>
  <menu id="root-menu" label="Openbox 3">
    <menu id="apps-menu"/>
    <menu id="places" label="Places" execute="obpipe-places"/>
    <separator label="System"/>
    <menu id="settings" label="Settings &amp; Tools">
      <item label="Terminal">
        <action name="Execute"><command>  xterm  </command></action>
      </item>
    </menu>
    <separator/>
    <item label="Reconfigure"><action name="Reconfigure"/></item>
    <item label="Restart"><action name="Restart"/></item>
  </menu>
</openbox_menu>
"""

OPENBOX_MENU_CSV = """Openbox 3,^tag(root-menu)
Applications,^checkout(apps-menu)
Places,^pipe(jgmenu_run ob --cmd='obpipe-places' --tag='Places')
^sep(System)
Settings &amp; Tools,^checkout(settings)
^sep()
Reconfigure,openbox --reconfigure
Restart,openbox --restart

Applications,^tag(apps-menu)
Firefox,firefox

Settings &amp; Tools,^tag(settings)
Back,^back()
Terminal,xterm

"""


@pytest.fixture
def openbox_menu_xml() -> str:
    """A small menu.xml exercising every kind of <menu> element."""
    return OPENBOX_MENU_XML


@pytest.fixture
def openbox_menu_csv() -> str:
    """Expected jgmenu CSV for ``openbox_menu_xml``."""
    return OPENBOX_MENU_CSV


@pytest.fixture
def menu_file(tmp_path: Path) -> Path:
    """``openbox_menu_xml`` written to disk."""
    path = tmp_path / "menu.xml"
    path.write_text(OPENBOX_MENU_XML, encoding="utf-8")
    return path
