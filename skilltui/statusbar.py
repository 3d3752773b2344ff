"""The one-line bar at the bottom of the screen."""

from __future__ import annotations

from dataclasses import dataclass

from skilltui.styles import Theme, join_horizontal, visible_width

_ERROR_BG = "#e64553"
_SUCCESS_BG = "#40a02b"
_MESSAGE_FG = "#ffffff"


@dataclass
class StatusBar:
    """Shows the active tab, counts and path, or a transient message."""

    theme: Theme
    width: int = 0
    skill_count: int = 0
    platforms: int = 0
    path: str = ""
    tab: str = ""
    plugin_info: str = ""
    message: str = ""
    message_is_error: bool = False

    def _fill(self, used: int) -> str:
        return self.theme.status_bar.render(" " * max(self.width - used, 0))

    def view(self) -> str:
        theme = self.theme
        left = theme.status_accent.render(f" {self.tab} ")

        if self.message:
            colour = _ERROR_BG if self.message_is_error else _SUCCESS_BG
            style = theme.status_bar.background(colour).foreground(_MESSAGE_FG)
            msg = style.render(f" {self.message} ")
            fill = self._fill(visible_width(left) + visible_width(msg))
            return join_horizontal(theme.status_bar.render(left), msg, fill)

        if self.plugin_info:
            center = theme.status_text.render(f" {self.plugin_info} ")
        else:
            center = theme.status_text.render(
                f" {self.skill_count} skills · {self.platforms} platforms "
            )
        right = theme.status_text.render(f" {self.path} ")
        fill = self._fill(visible_width(left) + visible_width(center) + visible_width(right))
        return join_horizontal(
            theme.status_bar.render(left),
            theme.status_bar.render(center),
            fill,
            theme.status_bar.render(right),
        )