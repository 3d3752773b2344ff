import pytest

from skilltui.search import SearchModel
from skilltui.styles import new_theme


@pytest.fixture
def search():
    return SearchModel(new_theme("mocha"))


def test_new(search):
    assert search.active() is False
    assert search.value() == ""


def test_focus_and_blur(search):
    search.focus()
    assert search.active() is True
    search.blur()
    assert search.active() is False


def test_reset(search):
    search.focus()
    search.update("h")
    search.reset()
    assert search.active() is False
    assert search.value() == ""


def test_view(search):
    view = search.view()
    assert view != ""
    assert "Search skills..." in view


def test_update_while_focused(search):
    search.focus()
    search.update("h")
    assert search.value() == "h"
    assert "h" in search.view()


def test_update_while_inactive_is_ignored(search):
    search.update("h")
    assert search.value() == ""


def test_char_limit(search):
    search.focus()
    for _ in range(150):
        search.update("x")
    assert len(search.value()) == 100