"""A single-line editable text field."""

from __future__ import annotations

from skilltui.styles import Style

_CURSOR_ON = "\x1b[7m"
_CURSOR_OFF = "\x1b[0m"


class TextInput:
    """A single-line text field driven by key names."""

    def __init__(
        self,
        *,
        prompt: str = "> ",
        placeholder: str = "",
        char_limit: int = 0,
        width: int = 0,
        prompt_style: Style | None = None,
        text_style: Style | None = None,
        placeholder_style: Style | None = None,
    ) -> None:
        self.prompt = prompt
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.prompt_style = prompt_style or Style()
        self.text_style = text_style or Style()
        self.placeholder_style = placeholder_style or Style().foreground("#585858")
        self.focused = False
        self._value = ""
        self._pos = 0

    @property
    def value(self) -> str:
        return self._value

    @property
    def position(self) -> int:
        return self._pos

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def set_value(self, value: str) -> None:
        """Replace the text, truncating to the limit, and move the cursor to the end."""
        if self.char_limit > 0:
            value = value[: self.char_limit]
        self._value = value
        self._pos = len(value)

    def _insert(self, text: str) -> None:
        if self.char_limit > 0:
            text = text[: max(self.char_limit - len(self._value), 0)]
        self._value = self._value[: self._pos] + text + self._value[self._pos:]
        self._pos += len(text)

    def _delete_word_backward(self) -> None:
        start = self._pos
        while start > 0 and self._value[start - 1].isspace():
            start -= 1
        while start > 0 and not self._value[start - 1].isspace():
            start -= 1
        self._value = self._value[:start] + self._value[self._pos:]
        self._pos = start

    def update(self, key: str) -> None:
        """Apply one key press; ignored while the field is not focused."""
        if not self.focused:
            return
        if key == "backspace":
            if self._pos > 0:
                self._value = self._value[: self._pos - 1] + self._value[self._pos:]
                self._pos -= 1
        elif key in ("delete", "ctrl+d"):
            self._value = self._value[: self._pos] + self._value[self._pos + 1:]
        elif key in ("left", "ctrl+b"):
            self._pos = max(self._pos - 1, 0)
        elif key in ("right", "ctrl+f"):
            self._pos = min(self._pos + 1, len(self._value))
        elif key in ("home", "ctrl+a"):
            self._pos = 0
        elif key in ("end", "ctrl+e"):
            self._pos = len(self._value)
        elif key == "ctrl+u":
            self._value = self._value[self._pos:]
            self._pos = 0
        elif key == "ctrl+k":
            self._value = self._value[: self._pos]
        elif key == "ctrl+w":
            self._delete_word_backward()
        elif len(key) == 1 and key.isprintable():
            self._insert(key)

    def _styled(self, text: str) -> str:
        return self.text_style.render(text) if text else ""

    def _placeholder_view(self) -> str:
        if not self.focused:
            return self.placeholder_style.render(self.placeholder)
        head, rest = self.placeholder[0], self.placeholder[1:]
        tail = self.placeholder_style.render(rest) if rest else ""
        return _CURSOR_ON + head + _CURSOR_OFF + tail

    def view(self) -> str:
        """Render the prompt and the visible part of the text."""
        prompt = self.prompt_style.render(self.prompt)
        if not self._value and self.placeholder:
            return prompt + self._placeholder_view()
        start = max(self._pos - self.width, 0) if self.width > 0 else 0
        shown = self._value[start: start + self.width] if self.width > 0 else self._value
        if not self.focused:
            return prompt + self._styled(shown)
        rel = self._pos - start
        under = shown[rel] if rel < len(shown) else " "
        return (
            prompt
            + self._styled(shown[:rel])
            + _CURSOR_ON + under + _CURSOR_OFF
            + self._styled(shown[rel + 1:])
        )