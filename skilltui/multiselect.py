"""A checklist that lets the user pick several items."""

from __future__ import annotations

from dataclasses import dataclass

from skilltui.styles import Theme

_HELP = "Space: select  a: toggle all  Enter: confirm  Esc: cancel"


@dataclass(frozen=True)
class MultiSelectItem:
    key: str
    label: str
    desc: str = ""


class MultiSelectModel:
    """A cursor-driven list of items with independent check marks."""

    def __init__(self, theme: Theme, title: str, items: list[MultiSelectItem] | None) -> None:
        self.theme = theme
        self.title = title
        self.items = list(items or [])
        self.cursor = 0
        self.width = 0
        self.height = 0
        self._chosen: set[str] = set()

    def update(self, key: str) -> None:
        """Handle a key: up/k, down/j, space to toggle, a to toggle all."""
        if key in ("up", "k"):
            self.cursor = max(self.cursor - 1, 0)
        elif key in ("down", "j"):
            if self.cursor < len(self.items) - 1:
                self.cursor += 1
        elif key == " ":
            if self.items:
                self._chosen ^= {self.items[self.cursor].key}
        elif key == "a":
            all_keys = {item.key for item in self.items}
            self._chosen = set() if self._chosen == all_keys else all_keys

    def view(self) -> str:
        theme = self.theme
        parts = []
        if self.title:
            parts.append(theme.subtitle.render(self.title) + "\n\n")
        for index, item in enumerate(self.items):
            here = index == self.cursor
            cursor = theme.cursor.render(">") if here else " "
            check = theme.checkbox_on if item.key in self._chosen else theme.checkbox_off
            label = (theme.selected if here else theme.normal).render(item.label)
            line = f" {cursor} {check} {label}"
            if item.desc:
                line += "  " + theme.dimmed.render(item.desc)
            parts.append(line + "\n")
        parts.append("\n")
        parts.append(theme.dimmed.render(_HELP))
        return "".join(parts)

    def selected(self) -> list[str]:
        """Return the chosen keys in list order."""
        return [item.key for item in self.items if item.key in self._chosen]

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height