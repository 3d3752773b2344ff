import pytest

from skilltui.statusbar import StatusBar
from skilltui.styles import new_theme, visible_height, visible_width


@pytest.fixture
def theme():
    return new_theme("mocha")


def test_view_default(theme):
    bar = StatusBar(theme=theme, width=80, skill_count=5, platforms=3, path="/test/path", tab="Skills")
    view = bar.view()
    assert "Skills" in view
    assert "5 skills · 3 platforms" in view
    assert "/test/path" in view


def test_view_with_message(theme):
    bar = StatusBar(theme=theme, width=80, tab="Plugins", message="Install succeeded!")
    view = bar.view()
    assert "Install succeeded!" in view
    assert "skills" not in view


def test_view_with_error_message(theme):
    bar = StatusBar(theme=theme, width=80, tab="Plugins", message="Clone failed", message_is_error=True)
    view = bar.view()
    assert "Clone failed" in view


def test_error_and_success_differ(theme):
    ok = StatusBar(theme=theme, width=80, tab="Plugins", message="done").view()
    bad = StatusBar(theme=theme, width=80, tab="Plugins", message="done", message_is_error=True).view()
    assert ok != bad


def test_view_with_plugin_info(theme):
    bar = StatusBar(theme=theme, width=80, tab="Plugins", plugin_info="3 plugins installed")
    view = bar.view()
    assert "3 plugins installed" in view
    assert "skills ·" not in view


def test_view_narrow_width(theme):
    bar = StatusBar(theme=theme, width=10, tab="Skills",
                    message="A very long message that exceeds the width")
    view = bar.view()
    assert "A very long message that exceeds the width" in view


def test_view_is_single_line(theme):
    bar = StatusBar(theme=theme, width=80, tab="Skills", path="/p")
    assert visible_height(bar.view()) == 1


def test_wider_bar_renders_wider(theme):
    narrow = StatusBar(theme=theme, width=40, tab="Skills", path="/p").view()
    wide = StatusBar(theme=theme, width=80, tab="Skills", path="/p").view()
    assert visible_width(wide) - visible_width(narrow) == 40