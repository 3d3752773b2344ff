"""The skills tab and the settings tab."""

from __future__ import annotations

from contextlib import suppress
from typing import Callable

from skilltui.layout import (
    abbreviate_platform,
    clamp_scroll,
    count_by_category,
    cycle_option,
    filter_by_query,
    platform_columns,
    scroll_window,
    truncate,
    visible_rows,
)
from skilltui.models import CENTRAL, Backend, Platform, Quit, Settings, Skill
from skilltui.multiselect import MultiSelectItem, MultiSelectModel
from skilltui.search import SearchModel
from skilltui.styles import ACCENT_COLORS, Theme, new_theme_with_accent
from skilltui.textinput import TextInput

LIST = "list"
DETAIL = "detail"
PLATFORM_SELECT = "platform_select"
DETAIL_PLATFORM_SELECT = "detail_platform_select"

SKILLS_START_Y = 6
DOUBLE_CLICK_SECONDS = 0.4
CONTENT_PREVIEW_LINES = 20

THEME_OPTIONS = ["mocha", "latte"]

_NAME_WIDTH = 24
_COL_WIDTH = 8

_LIST_HELP = (
    "  ↑/k↓/j: navigate  Space: select  a: all  Enter/d: detail  o: open  "
    "p: install  x: remove  /: search  r: refresh"
)
_DETAIL_HELP_COLLAPSED = "  Esc: back  i: install to...  u: uninstall all  o: expand content"
_DETAIL_HELP_EXPANDED = "  Esc: back  i: install to...  u: uninstall all  o: collapse content"
_SETTINGS_HELP = "  ↑/k↓/j: navigate  Enter: edit  q: quit"


class SkillsPane:
    """State and rendering of the skills tab."""

    def __init__(
        self,
        backend: Backend,
        settings: Settings,
        theme: Theme,
        platforms: list[Platform],
        search: SearchModel | None = None,
    ) -> None:
        self.backend = backend
        self.settings = settings
        self.theme = theme
        self.platforms = list(platforms)
        self.platform_map = {p.name: p.skills_dir for p in self.platforms if p.is_target()}
        self.search = search if search is not None else SearchModel(theme)
        self.skills: list[Skill] = []
        self.chosen: set[str] = set()
        self.cursor = 0
        self.scroll = 0
        self.detail: Skill | None = None
        self.full_content = False
        self.multi_sel = MultiSelectModel(theme, "", [])
        self.view = LIST
        self.height = 0
        self.last_click_time: float | None = None
        self.last_click_row = 0
        self.error: Exception | None = None
        self.reload()

    def reload(self) -> None:
        """Reread the skills directory and clear the selection."""
        try:
            skills = list(self.backend.list_skills(self.settings.skills_path))
        except Exception as exc:
            self.error = exc
            return
        self.skills = skills
        self.chosen = set()
        self.cursor = 0
        self.scroll = 0

    def filtered(self) -> list[Skill]:
        """Return the skills matching the search query."""
        return filter_by_query(self.skills, self.search.value())

    def _adjust_scroll(self, total: int) -> None:
        self.scroll = clamp_scroll(self.cursor, self.scroll, visible_rows(self.height), total)

    def _target_platforms(self) -> list[Platform]:
        return [p for p in self.platforms if p.is_target()]

    def _handle_search_key(self, key: str) -> None:
        self.search.update(key)
        if key == "esc":
            self.search.blur()
            self.search.reset()
            return
        if key == "enter":
            self.search.blur()
            return
        self.cursor = 0
        self.scroll = 0

    def handle_list_key(self, key: str):
        """Handle a key in the skill list (or the search box); returns a command or None."""
        if self.search.active():
            self._handle_search_key(key)
            return None
        if key in ("q", "ctrl+c"):
            return Quit()
        if key == "/":
            self.search.focus()
        elif key in ("up", "k"):
            filtered = self.filtered()
            self.cursor = max(self.cursor - 1, 0)
            self._adjust_scroll(len(filtered))
        elif key in ("down", "j"):
            filtered = self.filtered()
            if self.cursor < len(filtered) - 1:
                self.cursor += 1
            self._adjust_scroll(len(filtered))
        elif key == " ":
            if self.skills:
                self.chosen ^= {self.skills[self.cursor].name}
        elif key == "a":
            every = {s.name for s in self.skills}
            self.chosen = set() if self.chosen == every else every
        elif key in ("enter", "d"):
            if self.skills:
                self.detail = self.skills[self.cursor]
                self.view = DETAIL
        elif key == "p":
            if self.chosen:
                self.show_platform_select()
        elif key == "x":
            self.remove_selected()
        elif key == "r":
            self.reload()
        elif key == "o":
            filtered = self.filtered()
            if 0 <= self.cursor < len(filtered):
                with suppress(Exception):
                    self.backend.open_path(filtered[self.cursor].path)
        return None

    def _refresh_detail(self) -> None:
        if self.detail is None:
            return
        try:
            fresh = self.backend.get_skill(self.settings.skills_path, self.detail.name)
        except Exception:
            fresh = None
        if fresh is not None:
            self.detail = fresh

    def handle_detail_key(self, key: str):
        """Handle a key in the skill detail view."""
        if key in ("esc", "backspace"):
            self.view = LIST
            self.detail = None
            self.full_content = False
        elif key == "i":
            if self.detail is not None:
                self.show_detail_platform_select()
        elif key == "u":
            if self.detail is not None:
                for platform in self._target_platforms():
                    with suppress(Exception):
                        self.backend.uninstall_skill(platform.skills_dir, self.detail.name)
                self._refresh_detail()
        elif key == "o":
            self.full_content = not self.full_content
        return None

    def handle_platform_select_key(self, key: str, from_detail: bool):
        """Handle a key in a platform picker; Enter installs to the chosen platforms."""
        self.multi_sel.update(key)
        if key == "enter":
            selected = self.multi_sel.selected()
            if from_detail and self.detail is not None:
                for name in selected:
                    with suppress(Exception):
                        self.backend.install_skill(
                            self.platform_map.get(name, ""), self.detail.path, self.detail.name
                        )
                self._refresh_detail()
                self.view = DETAIL
            else:
                for name in selected:
                    target = self.platform_map.get(name, "")
                    for skill_name in sorted(self.chosen):
                        try:
                            skill = self.backend.get_skill(self.settings.skills_path, skill_name)
                        except Exception:
                            continue
                        if skill is None:
                            continue
                        with suppress(Exception):
                            self.backend.install_skill(target, skill.path, skill.name)
                self.view = LIST
                self.reload()
            return None
        if key == "esc":
            self.view = DETAIL if from_detail else LIST
        return None

    def show_platform_select(self) -> None:
        """Open the picker for installing the selected skills."""
        items = [
            MultiSelectItem(key=p.name, label=p.name, desc=p.skills_dir)
            for p in self.platforms
            if p.is_target() and p.installed
        ]
        if not items:
            return
        self.multi_sel = MultiSelectModel(self.theme, "Select target platforms", items)
        self.view = PLATFORM_SELECT

    def show_detail_platform_select(self) -> None:
        """Open the picker for installing the skill shown in detail."""
        if self.detail is None:
            return
        linked = set(self.backend.linked_platforms(self.platform_map, self.detail.name))
        items = [
            MultiSelectItem(
                key=p.name,
                label=p.name + (" (installed)" if p.name in linked else ""),
                desc=p.skills_dir,
            )
            for p in self.platforms
            if p.is_target() and p.installed
        ]
        if not items:
            return
        self.multi_sel = MultiSelectModel(self.theme, f"Install {self.detail.name} to:", items)
        self.view = DETAIL_PLATFORM_SELECT

    def remove_selected(self) -> None:
        """Uninstall every selected skill from every target platform."""
        for name in sorted(self.chosen):
            for platform in self._target_platforms():
                with suppress(Exception):
                    self.backend.uninstall_skill(platform.skills_dir, name)
        self.reload()

    def click(self, row: int, now: float) -> None:
        """Handle a left click on screen row; a quick second click toggles selection."""
        visible_index = row - SKILLS_START_Y
        index = visible_index + self.scroll
        filtered = self.filtered()
        if visible_index < 0 or not 0 <= index < len(filtered):
            return
        if (
            self.last_click_time is not None
            and index == self.last_click_row
            and now - self.last_click_time < DOUBLE_CLICK_SECONDS
        ):
            self.chosen ^= {filtered[index].name}
            self.last_click_time = None
        else:
            self.cursor = index
            self.last_click_time = now
            self.last_click_row = index

    def render_list(self) -> str:
        theme = self.theme
        parts = [theme.title.render("Skills"), "  ", self.search.view(), "\n\n"]

        filtered = self.filtered()
        if not filtered:
            if self.search.value():
                parts.append(theme.dimmed.render("  No matching skills found"))
            else:
                parts.append(theme.dimmed.render("  No skills found in " + self.settings.skills_path))
                parts.append("\n")
                parts.append(theme.dimmed.render("  Add skills to ~/.agents/skills/ to get started"))
            return "".join(parts)

        columns = platform_columns(self.platforms)
        header = "     " + " " * _NAME_WIDTH
        header += "".join(abbreviate_platform(c).ljust(_COL_WIDTH) for c in columns)
        parts.append(theme.subtitle.render(header) + "\n")
        sep_len = 5 + _NAME_WIDTH + _COL_WIDTH * len(columns)
        parts.append(theme.dimmed.render("  " + "─" * (sep_len - 2)) + "\n")

        visible = visible_rows(self.height)
        window = scroll_window(self.scroll, visible, len(filtered))
        for index in window:
            skill = filtered[index]
            here = index == self.cursor
            cursor = theme.cursor.render(">") if here else " "
            check = theme.checkbox_on if skill.name in self.chosen else theme.checkbox_off
            display = truncate(skill.name, _NAME_WIDTH - 1, _NAME_WIDTH - 4).ljust(_NAME_WIDTH)
            name_styled = (theme.selected if here else theme.normal).render(display)

            cols = []
            for column in columns:
                if self.backend.is_linked(self.platform_map.get(column, ""), skill.name):
                    cols.append(theme.success.render("✓".ljust(_COL_WIDTH)))
                else:
                    cols.append(theme.dimmed.render("·".ljust(_COL_WIDTH)))

            desc = (
                theme.dimmed.render(truncate(skill.description, 35, 32))
                if skill.description
                else ""
            )
            parts.append(f" {cursor} {check} {name_styled}{''.join(cols)} {desc}\n")

        total = len(filtered)
        if total > visible:
            parts.append(
                theme.dimmed.render(f"  ─── {window.start + 1}-{window.stop} / {total} ───")
            )
        parts.append("\n")
        parts.append(theme.dimmed.render(_LIST_HELP))
        return "".join(parts)

    def render_detail(self) -> str:
        skill = self.detail
        if skill is None:
            return ""
        theme = self.theme
        parts = [theme.title.render(skill.name), "\n"]

        if skill.version:
            parts += [theme.accent.render("Version: "), theme.normal.render(skill.version), "  "]
        if skill.author:
            parts += [theme.accent.render("Author: "), theme.normal.render(skill.author), "  "]
        if skill.description:
            parts += ["\n", theme.normal.render(skill.description)]
        parts.append("\n\n")

        parts += [theme.subtitle.render("Installed Platforms"), "\n"]
        linked = list(self.backend.linked_platforms(self.platform_map, skill.name))
        if linked:
            for name in linked:
                parts += [theme.success.render("  ✓ "), theme.normal.render(name), "\n"]
        else:
            parts += [theme.dimmed.render("  Not installed to any platform"), "\n"]

        if self.platforms:
            available = (
                len(self.platforms) - len(linked) - count_by_category(self.platforms, CENTRAL)
            )
            if available > 0:
                parts.append(
                    theme.dimmed.render(
                        "\n  Press 'i' to select platforms for installation "
                        f"({available} available)"
                    )
                )

        if skill.content:
            parts += ["\n", theme.subtitle.render("Content"), "\n"]
            content = skill.content
            if not self.full_content:
                lines = content.split("\n")
                if len(lines) > CONTENT_PREVIEW_LINES:
                    lines = lines[:CONTENT_PREVIEW_LINES] + [
                        "",
                        theme.dimmed.render("  ... press 'o' to expand full content"),
                    ]
                content = "\n".join(lines)
            parts.append(theme.normal.render(content))

        parts.append("\n\n")
        help_text = _DETAIL_HELP_EXPANDED if self.full_content else _DETAIL_HELP_COLLAPSED
        parts.append(theme.dimmed.render(help_text))
        return "".join(parts)

    def render(self) -> str:
        """Render whichever view of the tab is current."""
        if self.view == DETAIL:
            return self.render_detail()
        if self.view in (PLATFORM_SELECT, DETAIL_PLATFORM_SELECT):
            return self.multi_sel.view()
        return self.render_list()


THEME_ROW = 0
ACCENT_ROW = 1
SKILLS_PATH_ROW = 2
PLUGINS_PATH_ROW = 3
SETTINGS_COUNT = 4

_PATH_ROWS = (SKILLS_PATH_ROW, PLUGINS_PATH_ROW)


class SettingsPane:
    """State and rendering of the settings tab."""

    def __init__(
        self,
        backend: Backend,
        settings: Settings,
        theme: Theme,
        platforms: list[Platform],
        on_apply: Callable[[], None] | None = None,
    ) -> None:
        self.backend = backend
        self.settings = settings
        self.theme = theme
        self.platforms = list(platforms)
        self.on_apply = on_apply
        self.cursor = 0
        self.editing = False
        self.input = TextInput()

    def _apply(self) -> None:
        self.theme = new_theme_with_accent(self.settings.theme, self.settings.accent_color)
        if self.on_apply is not None:
            self.on_apply()
        else:
            with suppress(Exception):
                self.backend.save_settings(self.settings)

    def _start_editing(self, value: str) -> None:
        field = TextInput(
            char_limit=200,
            width=60,
            prompt_style=self.theme.accent,
            text_style=self.theme.normal,
        )
        field.set_value(value)
        field.focus()
        self.input = field
        self.editing = True

    def handle_key(self, key: str):
        """Handle a key in the settings tab; returns a command or None."""
        if self.editing:
            if key == "enter":
                if self.cursor == SKILLS_PATH_ROW:
                    self.settings.skills_path = self.input.value
                elif self.cursor == PLUGINS_PATH_ROW:
                    self.settings.plugins_path = self.input.value
                self.editing = False
                self.input.blur()
                self._apply()
            elif key == "esc":
                self.editing = False
                self.input.blur()
            else:
                self.input.update(key)
            return None

        if key in ("q", "ctrl+c"):
            return Quit()
        if key in ("up", "k"):
            self.cursor = max(self.cursor - 1, 0)
        elif key in ("down", "j"):
            self.cursor = min(self.cursor + 1, SETTINGS_COUNT - 1)
        elif key == "enter":
            if self.cursor == THEME_ROW:
                self.settings.theme = cycle_option(THEME_OPTIONS, self.settings.theme)
                self._apply()
            elif self.cursor == ACCENT_ROW:
                self.settings.accent_color = cycle_option(ACCENT_COLORS, self.settings.accent_color)
                self._apply()
            elif self.cursor == SKILLS_PATH_ROW:
                self._start_editing(self.settings.skills_path)
            elif self.cursor == PLUGINS_PATH_ROW:
                self._start_editing(self.settings.plugins_path)
        return None

    def render(self) -> str:
        theme = self.theme
        parts = [theme.title.render("Settings"), "\n\n"]
        items = [
            ("Theme", self.settings.theme),
            ("Accent Color", self.settings.accent_color),
            ("Skills Path", self.settings.skills_path),
            ("Plugins Path", self.settings.plugins_path),
        ]
        for index, (label_text, value) in enumerate(items):
            here = index == self.cursor
            cursor = theme.cursor.render("> ") if here else "  "
            label = theme.accent.render(label_text.ljust(14))
            if self.editing and here and index in _PATH_ROWS:
                parts.append(f"{cursor}{label} {self.input.view()}\n")
                continue
            value_style = theme.selected if here else theme.normal
            hint = ""
            if here:
                if index in (THEME_ROW, ACCENT_ROW):
                    hint = theme.dimmed.render("  ← Enter to cycle")
                else:
                    hint = theme.dimmed.render("  ← Enter to edit")
            parts.append(f"{cursor}{label} {value_style.render(value)}{hint}\n")

        parts += ["\n", theme.subtitle.render("Detected Platforms"), "\n"]
        for platform in self.platforms:
            if not platform.is_target():
                continue
            icon = theme.success.render("✓") if platform.installed else theme.dimmed.render("○")
            parts.append(
                f"  {icon} {platform.name.ljust(15)} {theme.dimmed.render(platform.skills_dir)}\n"
            )

        parts += ["\n", theme.dimmed.render(_SETTINGS_HELP)]
        return "".join(parts)