"""Terminal styling primitives and the colour themes used by the interface."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from wcwidth import wcswidth, wcwidth

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
_RESET = "\x1b[0m"


def _strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def _line_width(line: str) -> int:
    plain = _strip_ansi(line)
    width = wcswidth(plain)
    if width >= 0:
        return width
    return sum(max(wcwidth(ch), 0) for ch in plain)


def visible_width(text: str) -> int:
    """Return the display width of the widest line, ignoring escape codes."""
    return max(_line_width(line) for line in text.split("\n"))


def visible_height(text: str) -> int:
    """Return the number of lines the text occupies."""
    return text.count("\n") + 1


def _pad_line(line: str, width: int) -> str:
    return line + " " * max(width - _line_width(line), 0)


def join_horizontal(*args: str) -> str:
    """Place blocks side by side, aligned to their top edge."""
    if not args:
        return ""
    blocks = [block.split("\n") for block in args]
    widths = [visible_width(block) for block in args]
    height = max(len(lines) for lines in blocks)
    rows = []
    for row in range(height):
        parts = (
            _pad_line(lines[row] if row < len(lines) else "", width)
            for lines, width in zip(blocks, widths)
        )
        rows.append("".join(parts))
    return "\n".join(rows)


def join_vertical(*args: str) -> str:
    """Stack blocks on top of each other, aligned to their left edge."""
    if not args:
        return ""
    lines = [line for block in args for line in block.split("\n")]
    width = max(_line_width(line) for line in lines)
    return "\n".join(_pad_line(line, width) for line in lines)


def _hex_rgb(color: str) -> tuple[int, int, int]:
    digits = color[1:] if color.startswith("#") else color
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"invalid colour: {color!r}")
    try:
        value = int(digits, 16)
    except ValueError:
        raise ValueError(f"invalid colour: {color!r}") from None
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


@dataclass(frozen=True)
class Style:
    """An immutable text style; each modifier returns a new style."""

    fg: str | None = None
    bg: str | None = None
    strong: bool = False
    pad: tuple[int, int, int, int] = (0, 0, 0, 0)
    margin_below: int = 0
    border_color: str | None = None

    def foreground(self, color: str) -> Style:
        _hex_rgb(color)
        return replace(self, fg=color)

    def background(self, color: str) -> Style:
        _hex_rgb(color)
        return replace(self, bg=color)

    def bold(self, enabled: bool = True) -> Style:
        return replace(self, strong=enabled)

    def padding(self, *args: int) -> Style:
        """Set padding in CSS order: all; vertical, horizontal; top, horizontal, bottom; or all four."""
        if any(value < 0 for value in args):
            raise ValueError("padding must not be negative")
        if len(args) == 1:
            (a,) = args
            pad = (a, a, a, a)
        elif len(args) == 2:
            vertical, horizontal = args
            pad = (vertical, horizontal, vertical, horizontal)
        elif len(args) == 3:
            top, horizontal, bottom = args
            pad = (top, horizontal, bottom, horizontal)
        elif len(args) == 4:
            pad = tuple(args)
        else:
            raise ValueError("padding takes between one and four values")
        return replace(self, pad=pad)

    def margin_bottom(self, lines: int) -> Style:
        if lines < 0:
            raise ValueError("margin must not be negative")
        return replace(self, margin_below=lines)

    def border_foreground(self, color: str) -> Style:
        _hex_rgb(color)
        return replace(self, border_color=color)

    def _sgr(self) -> str:
        codes = []
        if self.strong:
            codes.append("1")
        if self.fg:
            codes.append("38;2;{};{};{}".format(*_hex_rgb(self.fg)))
        if self.bg:
            codes.append("48;2;{};{};{}".format(*_hex_rgb(self.bg)))
        return ";".join(codes)

    def render(self, text: str) -> str:
        """Apply the style to text, returning a printable string."""
        lines = text.split("\n")
        width = max(_line_width(line) for line in lines)
        top, right, bottom, left = self.pad
        body = [" " * left + _pad_line(line, width) + " " * right for line in lines]
        blank = " " * (width + left + right)
        body = [blank] * top + body + [blank] * bottom
        codes = self._sgr()
        if codes:
            prefix = f"\x1b[{codes}m"
            body = [prefix + line.replace(_RESET, _RESET + prefix) + _RESET for line in body]
        body.extend([blank] * self.margin_below)
        return "\n".join(body)


@dataclass(frozen=True)
class Palette:
    """A named set of colours."""

    rosewater: str
    flamingo: str
    pink: str
    mauve: str
    red: str
    maroon: str
    peach: str
    yellow: str
    green: str
    teal: str
    sky: str
    sapphire: str
    blue: str
    lavender: str
    text: str
    subtext1: str
    subtext0: str
    overlay2: str
    overlay1: str
    overlay0: str
    surface2: str
    surface1: str
    surface0: str
    base: str
    mantle: str
    crust: str


MOCHA = Palette(
    rosewater="#F5E0DC", flamingo="#F2CDCD", pink="#F5C2E7", mauve="#CBA6F7",
    red="#F38BA8", maroon="#EBA0AC", peach="#FAB387", yellow="#F9E2AF",
    green="#A6E3A1", teal="#94E2D5", sky="#89DCEB", sapphire="#74C7EC",
    blue="#89B4FA", lavender="#B4BEFE", text="#CDD6F4", subtext1="#BAC2DE",
    subtext0="#A6ADC8", overlay2="#9399B2", overlay1="#7F849C", overlay0="#6C7086",
    surface2="#585B70", surface1="#45475A", surface0="#313244", base="#1E1E2E",
    mantle="#181825", crust="#11111B",
)

LATTE = Palette(
    rosewater="#DC8A78", flamingo="#DD7878", pink="#EA76CB", mauve="#8839EF",
    red="#D20F39", maroon="#E64553", peach="#FE640B", yellow="#DF8E1D",
    green="#40A02B", teal="#179299", sky="#04A5E5", sapphire="#209FB5",
    blue="#1E66F5", lavender="#7287FD", text="#4C4F69", subtext1="#5C5F77",
    subtext0="#6C6F85", overlay2="#7C7F93", overlay1="#8C8FA1", overlay0="#9CA0B0",
    surface2="#ACB0BE", surface1="#BCC0CC", surface0="#CCD0DA", base="#EFF1F5",
    mantle="#E6E9EF", crust="#DCE0E8",
)

PALETTES = {"mocha": MOCHA, "latte": LATTE}

ACCENT_COLORS = [
    "mauve", "pink", "red", "peach", "yellow",
    "green", "teal", "sky", "blue", "lavender",
]

_ACCENTABLE = frozenset({
    "rosewater", "flamingo", "pink", "mauve", "red", "maroon", "peach",
    "yellow", "green", "teal", "sky", "sapphire", "blue", "lavender",
})


@dataclass(frozen=True)
class Theme:
    """The set of styles the interface draws with."""

    title: Style
    subtitle: Style
    active_tab: Style
    inactive_tab: Style
    tab_gap: Style
    selected: Style
    cursor: Style
    normal: Style
    dimmed: Style
    accent: Style
    success: Style
    warning: Style
    error: Style
    status_bar: Style
    status_text: Style
    status_accent: Style
    checkbox_on: str
    checkbox_off: str
    border: Style


def accent_hex(palette: str, accent: str) -> str:
    """Return the hex colour of an accent in a palette, or "" if either is unknown."""
    colours = PALETTES.get(palette)
    if colours is None or accent not in _ACCENTABLE:
        return ""
    return getattr(colours, accent)


def _build_theme(p: Palette, *, title: str, subtitle: str, inactive: str,
                 dimmed: str, status_text: str, checkbox_off: str) -> Theme:
    plain = Style()
    return Theme(
        title=plain.bold().foreground(title).margin_bottom(1),
        subtitle=plain.bold().foreground(subtitle),
        active_tab=plain.bold().foreground(p.crust).background(p.mauve).padding(0, 2),
        inactive_tab=plain.foreground(inactive).padding(0, 2),
        tab_gap=plain.background(p.base),
        selected=plain.foreground(p.green).bold(),
        cursor=plain.foreground(p.mauve).bold(),
        normal=plain.foreground(p.text),
        dimmed=plain.foreground(dimmed),
        accent=plain.foreground(p.mauve),
        success=plain.foreground(p.green),
        warning=plain.foreground(p.yellow),
        error=plain.foreground(p.red),
        status_bar=plain.background(p.surface0).foreground(p.text).padding(0, 1),
        status_text=plain.foreground(status_text),
        status_accent=plain.foreground(p.mauve).bold(),
        checkbox_on=plain.foreground(p.green).render("◉"),
        checkbox_off=plain.foreground(checkbox_off).render("○"),
        border=plain.border_foreground(p.surface1),
    )


def _mocha_theme() -> Theme:
    p = MOCHA
    return _build_theme(p, title=p.pink, subtitle=p.mauve, inactive=p.subtext1,
                        dimmed=p.subtext0, status_text=p.text, checkbox_off=p.overlay2)


def _latte_theme() -> Theme:
    p = LATTE
    return _build_theme(p, title=p.mauve, subtitle=p.pink, inactive=p.overlay1,
                        dimmed=p.overlay0, status_text=p.subtext1, checkbox_off=p.overlay0)


def new_theme(name: str) -> Theme:
    """Return the named theme with its default accent."""
    return new_theme_with_accent(name, "")


def new_theme_with_accent(name: str, accent: str) -> Theme:
    """Return the named theme ("latte", otherwise mocha) recoloured with an accent."""
    theme = _latte_theme() if name == "latte" else _mocha_theme()
    colour = accent_hex(name, accent)
    if not colour:
        return theme
    return replace(
        theme,
        title=theme.title.foreground(colour),
        subtitle=theme.subtitle.foreground(colour),
        active_tab=theme.active_tab.background(colour),
        cursor=theme.cursor.foreground(colour),
        accent=theme.accent.foreground(colour),
        status_accent=theme.status_accent.foreground(colour),
    )