from skilltui.styles import visible_width
from skilltui.textinput import TextInput


def _typed(text, **options):
    field = TextInput(**options)
    field.focus()
    for ch in text:
        field.update(ch)
    return field


def test_typing_inserts_characters():
    field = _typed("hello world")
    assert field.value == "hello world"
    assert field.position == len("hello world")


def test_unfocused_input_ignores_keys():
    field = TextInput()
    field.update("x")
    assert field.value == ""


def test_blur_stops_editing():
    field = _typed("ab")
    field.blur()
    field.update("c")
    assert field.value == "ab"
    assert field.focused is False


def test_backspace_removes_last_character():
    text = "abc"
    field = _typed(text)
    field.update("backspace")
    assert field.value == text[:-1]


def test_backspace_at_start_does_nothing():
    field = _typed("abc")
    field.update("home")
    field.update("backspace")
    assert field.value == "abc"
    assert field.position == 0


def test_insert_in_middle_after_left():
    field = _typed("ac")
    field.update("left")
    field.update("b")
    assert field.value == "abc"


def test_delete_removes_character_under_cursor():
    text = "xyz"
    field = _typed(text)
    field.update("home")
    field.update("delete")
    assert field.value == text[1:]


def test_ctrl_u_and_ctrl_k_split_at_cursor():
    text = "abcdef"
    field = _typed(text)
    for _ in range(3):
        field.update("left")
    field.update("ctrl+k")
    assert field.value == text[:3]
    field.update("ctrl+u")
    assert field.value == ""


def test_ctrl_w_deletes_previous_word():
    field = _typed("one two")
    field.update("ctrl+w")
    assert field.value == "one "


def test_char_limit_on_typing():
    field = _typed("abcdefgh", char_limit=4)
    assert len(field.value) == 4
    assert field.value == "abcdefgh"[:4]


def test_set_value_truncates_and_moves_cursor():
    field = TextInput(char_limit=3)
    field.set_value("abcdef")
    assert field.value == "abcdef"[:3]
    assert field.position == len(field.value)


def test_cursor_movement_is_bounded():
    field = _typed("ab")
    field.update("right")
    assert field.position == 2
    field.update("home")
    field.update("left")
    assert field.position == 0


def test_named_keys_are_not_inserted():
    field = _typed("a")
    field.update("enter")
    field.update("esc")
    assert field.value == "a"


def test_view_shows_prompt_and_value():
    field = TextInput(prompt="/ ")
    field.set_value("query")
    view = field.view()
    assert "/ " in view
    assert "query" in view


def test_view_shows_placeholder_when_empty():
    field = TextInput(placeholder="Type here")
    assert "Type here" in field.view()


def test_view_respects_width():
    field = TextInput(prompt="", width=5)
    field.set_value("a" * 30)
    assert visible_width(field.view()) == 5


def test_focused_view_includes_cursor_cell():
    field = _typed("abc", prompt="")
    assert visible_width(field.view()) == len("abc") + 1