"""
This module provides the terminal side of colored JSON output: color
specifications and an output stream that knows whether it may emit ANSI
escape sequences.

Escape sequences are produced by termcolor, so any color name termcolor
understands can be used in a ColorSpec.
"""

import os
import sys
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

# Import color tables and escape encoding from termcolor
from termcolor import ATTRIBUTES, COLORS, HIGHLIGHTS, RESET, can_colorize, colored

Color = Union[str, Tuple[int, int, int]]

# Bright variant of each named color, used when a spec is marked intense
INTENSE_COLORS = {
    "black": "dark_grey",
    "grey": "dark_grey",
    "red": "light_red",
    "green": "light_green",
    "yellow": "light_yellow",
    "blue": "light_blue",
    "magenta": "light_magenta",
    "cyan": "light_cyan",
    "light_grey": "white",
}


def _check_color(color: Optional[Color], table: dict, prefix: str = "") -> Optional[Color]:
    if color is None:
        return None
    if isinstance(color, tuple):
        if len(color) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            raise ValueError(f"Invalid RGB color: {color!r}")
        return color
    if not isinstance(color, str):
        raise ValueError(f"Invalid color: {color!r}")
    name = color[len(prefix):] if prefix and color.startswith(prefix) else color
    if prefix + name not in table:
        raise ValueError(f"Unknown color: {color!r}")
    return name


class ColorSpec:
    """
    A terminal style: foreground and background color plus text attributes.

    A spec with nothing set is "empty" and produces no escape sequence at all.
    Setters return the spec itself so they can be chained:

        >>> spec = ColorSpec().set_fg("cyan").set_bold(True)
        >>> spec.escape_sequence()
        '\\x1b[1m\\x1b[36m'

    Args:
        fg: Foreground color, a termcolor color name or an (r, g, b) tuple
        bg: Background color, a color name with or without the ``on_`` prefix,
            or an (r, g, b) tuple
    """

    def __init__(
        self,
        fg: Optional[Color] = None,
        bg: Optional[Color] = None,
        *,
        bold: bool = False,
        dimmed: bool = False,
        italic: bool = False,
        underline: bool = False,
        strikethrough: bool = False,
        intense: bool = False,
    ):
        self.fg = _check_color(fg, COLORS)
        self.bg = _check_color(bg, HIGHLIGHTS, "on_")
        self.bold = bold
        self.dimmed = dimmed
        self.italic = italic
        self.underline = underline
        self.strikethrough = strikethrough
        self.intense = intense

    def set_fg(self, color: Optional[Color]) -> "ColorSpec":
        self.fg = _check_color(color, COLORS)
        return self

    def set_bg(self, color: Optional[Color]) -> "ColorSpec":
        self.bg = _check_color(color, HIGHLIGHTS, "on_")
        return self

    def set_bold(self, yes: bool) -> "ColorSpec":
        self.bold = yes
        return self

    def set_dimmed(self, yes: bool) -> "ColorSpec":
        self.dimmed = yes
        return self

    def set_italic(self, yes: bool) -> "ColorSpec":
        self.italic = yes
        return self

    def set_underline(self, yes: bool) -> "ColorSpec":
        self.underline = yes
        return self

    def set_strikethrough(self, yes: bool) -> "ColorSpec":
        self.strikethrough = yes
        return self

    def set_intense(self, yes: bool) -> "ColorSpec":
        self.intense = yes
        return self

    def clear(self) -> "ColorSpec":
        """Reset every field so the spec becomes empty."""
        self.fg = None
        self.bg = None
        self.bold = False
        self.dimmed = False
        self.italic = False
        self.underline = False
        self.strikethrough = False
        self.intense = False
        return self

    def copy(self) -> "ColorSpec":
        return ColorSpec(
            self.fg,
            self.bg,
            bold=self.bold,
            dimmed=self.dimmed,
            italic=self.italic,
            underline=self.underline,
            strikethrough=self.strikethrough,
            intense=self.intense,
        )

    def _attrs(self) -> List[str]:
        flags = [
            ("bold", self.bold),
            ("dark", self.dimmed),
            ("italic", self.italic),
            ("underline", self.underline),
            ("strike", self.strikethrough),
        ]
        return [name for name, enabled in flags if enabled and name in ATTRIBUTES]

    def _resolve(self, color: Optional[Color]) -> Optional[Color]:
        if self.intense and isinstance(color, str):
            return INTENSE_COLORS.get(color, color)
        return color

    def escape_sequence(self) -> str:
        """
        Return the ANSI escape sequence that switches a terminal to this style.

        Returns:
            str: The escape sequence, or an empty string for an empty spec
        """
        bg = self._resolve(self.bg)
        if isinstance(bg, str):
            bg = "on_" + bg
        attrs = self._attrs()
        prefix = colored(
            "", self._resolve(self.fg), bg, attrs or None, force_color=True
        )
        # colored() always terminates with RESET, even for unstyled text
        return prefix[: -len(RESET)]

    def is_none(self) -> bool:
        return self.escape_sequence() == ""

    def _key(self):
        return (
            self.fg,
            self.bg,
            self.bold,
            self.dimmed,
            self.italic,
            self.underline,
            self.strikethrough,
            self.intense,
        )

    def __eq__(self, other):
        if not isinstance(other, ColorSpec):
            return NotImplemented
        return self._key() == other._key()

    # Mutable through the set_* builders
    __hash__ = None

    def __repr__(self):
        fields = [f"fg={self.fg!r}", f"bg={self.bg!r}"]
        for name in ("bold", "dimmed", "italic", "underline", "strikethrough", "intense"):
            if getattr(self, name):
                fields.append(f"{name}=True")
        return f"ColorSpec({', '.join(fields)})"


class ColorChoice(Enum):
    """Whether a ColorStream emits color."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


def _auto_color(file) -> bool:
    """Decide whether a file should receive color when ColorChoice.AUTO is used."""
    if file is sys.stdout:
        return can_colorize()

    # Apply the same environment overrides termcolor uses for stdout
    if os.environ.get("ANSI_COLORS_DISABLED") or os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("TERM") == "dumb":
        return False

    isatty = getattr(file, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


class ColorStream:
    """
    A text output stream that can switch terminal styles.

    Color support is decided once, when the stream is created. When it is off,
    set_color() and reset() write nothing and the stream behaves like the
    wrapped file.

    Args:
        file: Text file to write to (default: sys.stdout)
        choice: Whether to emit color, or detect it from the file and environment
    """

    def __init__(self, file=None, choice: ColorChoice = ColorChoice.AUTO):
        self.file = file if file is not None else sys.stdout
        self.choice = choice
        if choice is ColorChoice.AUTO:
            self._color = _auto_color(self.file)
        else:
            self._color = choice is ColorChoice.ALWAYS

    @classmethod
    def stdout(cls, choice: ColorChoice = ColorChoice.AUTO) -> "ColorStream":
        return cls(sys.stdout, choice)

    @classmethod
    def stderr(cls, choice: ColorChoice = ColorChoice.AUTO) -> "ColorStream":
        return cls(sys.stderr, choice)

    def supports_color(self) -> bool:
        return self._color

    def is_synchronous(self) -> bool:
        # ANSI styles travel in-band with the text
        return False

    def set_color(self, spec: ColorSpec) -> None:
        if not self._color:
            return
        sequence = spec.escape_sequence()
        if sequence:
            self.file.write(sequence)

    def reset(self) -> None:
        if self._color:
            self.file.write(RESET)

    def write(self, text: str) -> int:
        return self.file.write(text)

    def writelines(self, lines: Iterable[str]) -> None:
        self.file.writelines(lines)

    def flush(self) -> None:
        self.file.flush()
