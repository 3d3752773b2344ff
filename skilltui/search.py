"""The search box shown above lists."""

from __future__ import annotations

from skilltui.styles import Theme
from skilltui.textinput import TextInput


class SearchModel:
    """A text field that is active only while the user is searching."""

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self.input = TextInput(
            prompt="/ ",
            placeholder="Search skills...",
            char_limit=100,
            width=40,
            prompt_style=theme.accent,
            text_style=theme.normal,
        )
        self._active = False

    def update(self, key: str) -> None:
        self.input.update(key)

    def view(self) -> str:
        return self.input.view()

    def value(self) -> str:
        return self.input.value

    def active(self) -> bool:
        return self._active

    def focus(self) -> None:
        self.input.focus()
        self._active = True

    def blur(self) -> None:
        self.input.blur()
        self._active = False

    def reset(self) -> None:
        """Clear the query and deactivate the box."""
        self.input.set_value("")
        self._active = False