import pytest

from skilltui.styles import (
    ACCENT_COLORS,
    LATTE,
    MOCHA,
    Style,
    accent_hex,
    join_horizontal,
    join_vertical,
    new_theme,
    new_theme_with_accent,
    visible_height,
    visible_width,
)


def test_new_theme_mocha():
    theme = new_theme("mocha")
    assert "◉" in theme.checkbox_on
    assert "○" in theme.checkbox_off


def test_new_theme_latte():
    theme = new_theme("latte")
    assert "◉" in theme.checkbox_on
    assert theme.normal.fg == LATTE.text


def test_new_theme_defaults_to_mocha():
    theme = new_theme("unknown")
    assert theme.checkbox_on == new_theme("mocha").checkbox_on
    assert theme.normal.fg == MOCHA.text


def test_new_theme_with_accent():
    theme = new_theme_with_accent("mocha", "pink")
    assert "◉" in theme.checkbox_on
    assert theme.accent.fg == MOCHA.pink
    assert theme.active_tab.bg == MOCHA.pink
    assert theme.status_accent.fg == MOCHA.pink


def test_new_theme_with_accent_no_accent():
    theme = new_theme_with_accent("mocha", "")
    assert theme == new_theme("mocha")


def test_new_theme_with_accent_invalid_accent():
    theme = new_theme_with_accent("mocha", "nonexistent-color")
    assert theme == new_theme("mocha")


def test_new_theme_with_accent_latte():
    theme = new_theme_with_accent("latte", "blue")
    assert "◉" in theme.checkbox_on
    assert theme.title.fg == LATTE.blue


def test_accent_hex_valid_mocha():
    assert accent_hex("mocha", "mauve") == MOCHA.mauve


def test_accent_hex_valid_latte():
    assert accent_hex("latte", "red") == LATTE.red


def test_accent_hex_invalid_palette():
    assert accent_hex("invalid", "mauve") == ""


def test_accent_hex_invalid_color():
    assert accent_hex("mocha", "nonexistent") == ""


def test_accent_colors_all_in_mocha():
    assert len(ACCENT_COLORS) > 0
    for colour in ACCENT_COLORS:
        assert accent_hex("mocha", colour) != ""
        assert accent_hex("mocha", colour).startswith("#")


def test_palettes_drive_themes():
    assert new_theme("mocha").tab_gap.bg == MOCHA.base
    assert new_theme("latte").tab_gap.bg == LATTE.base


def test_plain_style_renders_text_unchanged():
    assert Style().render("hello") == "hello"


def test_styled_render_keeps_visible_width():
    rendered = Style().bold().foreground("#FF0000").render("hello")
    assert rendered != "hello"
    assert visible_width(rendered) == len("hello")


def test_padding_adds_width():
    rendered = Style().padding(0, 2).render("ab")
    assert rendered == "  ab  "
    assert visible_width(rendered) == 6


def test_padding_four_values_and_height():
    rendered = Style().padding(1, 0, 1, 0).render("x")
    assert visible_height(rendered) == 3


def test_padding_rejects_bad_counts():
    with pytest.raises(ValueError):
        Style().padding(1, 2, 3, 4, 5)
    with pytest.raises(ValueError):
        Style().padding()


def test_padding_rejects_negative():
    with pytest.raises(ValueError):
        Style().padding(-1)


def test_margin_bottom_adds_lines():
    rendered = Style().margin_bottom(1).render("title")
    assert visible_height(rendered) == 2


def test_invalid_colour_rejected():
    with pytest.raises(ValueError):
        Style().foreground("not-a-colour")


def test_style_is_immutable_builder():
    base = Style()
    bold = base.bold()
    assert base.strong is False
    assert bold.strong is True


def test_multiline_render_aligns_lines():
    rendered = Style().render("a\nabc")
    assert rendered.split("\n") == ["a  ", "abc"]


def test_visible_width_wide_characters():
    assert visible_width("中文") == 4


def test_join_horizontal_widths_add_up():
    joined = join_horizontal("ab", "cde\nf")
    assert visible_width(joined) == 5
    assert visible_height(joined) == 2
    assert joined.split("\n")[0] == "abcde"


def test_join_vertical_pads_to_widest():
    joined = join_vertical("a", "abc")
    assert joined.split("\n") == ["a  ", "abc"]


def test_nested_styles_keep_outer_width():
    inner = Style().foreground("#00FF00").render("in")
    outer = Style().background("#000000").padding(0, 1).render(inner)
    assert visible_width(outer) == 4