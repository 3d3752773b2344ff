# skilltui

`skilltui` holds the state, key handling and rendering for parts of a
terminal interface that manages agent skills across several coding-assistant
platforms. Every screen is rendered as a string of ANSI-styled text; drawing
it and reading keys is left to whatever terminal loop you put around it.

## Modules

- `skilltui.styles` – an immutable `Style` (`foreground`, `background`,
  `bold`, `padding`, `margin_bottom`, `border_foreground`, `render`),
  width-aware helpers (`visible_width`, `visible_height`, `join_horizontal`,
  `join_vertical`), the `Palette` records `MOCHA` and `LATTE`,
  `ACCENT_COLORS`, and the `Theme` built by `new_theme` and
  `new_theme_with_accent`.
- `skilltui.textinput` – `TextInput`, a single-line field with a prompt,
  placeholder, character limit and visible width. It takes key names such as
  `"backspace"`, `"left"`, `"ctrl+a"`, `"ctrl+w"` or a single printable
  character, and ignores keys while not focused.
- `skilltui.search` – `SearchModel`, the `/` search box (`focus`, `blur`,
  `reset`, `value`, `active`, `update`, `view`).
- `skilltui.multiselect` – `MultiSelectItem` and `MultiSelectModel`, a
  checkbox list: `up`/`k` and `down`/`j` move, space toggles, `a` toggles
  all; `selected()` returns the chosen keys in list order.
- `skilltui.statusbar` – `StatusBar`, the bottom line showing the tab, skill
  and platform counts (or plugin info) and a path, or a green/red message.
- `skilltui.models` – `Skill`, `Platform`, `PluginInfo`, `Marketplace`,
  `Settings`, the `Backend` protocol, and message/command records
  (`WindowSize`, `MouseClick`, `MarketplaceCloned`, `MarketplaceInstalled`,
  `ClearStatus`, `Quit`, `ClearStatusAfter`, `Task`).
- `skilltui.layout` – list helpers: `abbreviate_platform`, `cycle_option`,
  `count_by_category`, `filter_by_query`, `truncate`, `visible_rows`,
  `clamp_scroll`, `platform_columns`, `scroll_window`.
- `skilltui.skills_view` – `SkillsPane` (skill list, search, detail view,
  platform pickers, mouse clicks with double-click selection) and
  `SettingsPane` (theme, accent colour, skills path, plugins path).

## Themes

Two palettes are available, `mocha` (dark) and `latte` (light); any other
name gives `mocha`. An accent recolours titles, subtitles, the active tab,
the cursor, accent text and the status-bar tab label:

```python
from skilltui.styles import accent_hex, new_theme_with_accent

accent_hex("mocha", "mauve")        # "#CBA6F7"
accent_hex("latte", "red")          # "#D20F39"
accent_hex("mocha", "nonexistent")  # ""  (theme defaults are kept)

theme = new_theme_with_accent("latte", "blue")
print(theme.title.render("Skills"))
```

## Widgets

```python
from skilltui.multiselect import MultiSelectItem, MultiSelectModel
from skilltui.statusbar import StatusBar
from skilltui.styles import new_theme

theme = new_theme("mocha")

picker = MultiSelectModel(theme, "Select target platforms", [
    MultiSelectItem(key="a", label="A"),
    MultiSelectItem(key="b", label="B"),
])
picker.update("j")
picker.update(" ")
picker.selected()    # ["b"]

bar = StatusBar(theme=theme, width=80, tab="Skills",
                skill_count=5, platforms=3, path="/test/path")
print(bar.view())
```

## List helpers

```python
from skilltui.layout import abbreviate_platform, cycle_option, truncate

abbreviate_platform("claude-code")            # "claude"
abbreviate_platform("copilot")                # "copilot"
cycle_option(["mocha", "latte"], "mocha")     # "latte"
cycle_option(["mocha", "latte"], "other")     # "mocha"
truncate("a long description", 10, 7)         # "a long ..."
```

## Panes

`SkillsPane` and `SettingsPane` take a `Backend`, a `Settings` object, a
`Theme` and the list of `Platform`s. Their key handlers return a `Quit`
command for `q` or `Ctrl+C`, and `None` otherwise.

Skills list: `↑/k` `↓/j` move, `Space` selects, `a` toggles all,
`Enter`/`d` opens details, `o` asks the backend to open the skill folder,
`p` picks platforms to install the selection to, `x` removes it from every
platform, `/` searches, `r` reloads. In details: `i` installs to chosen
platforms, `u` uninstalls from all, `o` expands or collapses the content,
`Esc` goes back.

Settings: `↑/k` `↓/j` move, `Enter` cycles the theme and accent colour or
edits a path (`Enter` saves, `Esc` cancels). Changes are saved through
`Backend.save_settings`, unless an `on_apply` callback is given.

## What this package does not do

- It has no plugin/marketplace pane and no whole-screen application model:
  there is no tab bar, no switching between tabs, and nothing that routes
  `WindowSize`, `MouseClick` or the marketplace messages in `models`.
- It has no command to run and no terminal event loop; it only renders
  strings and reacts to the key names you pass in.
- It does not touch the file system, remote registries or platform tools
  itself. All of that goes through a `Backend` that you implement.