"""
This module provides ColorFormatter, which wraps a plain JSON formatter and
colors each literal according to a Theme.

The wrapped formatter still produces every character of the JSON text; this
layer only adds a color switch before a literal and a reset after it. Brackets,
commas, colons and whitespace are never colored.
"""

from termcolor_json.format import Formatter
from termcolor_json.stream import ColorSpec
from termcolor_json.theme import Theme
from termcolor_json.writer import SharedWriter


class ColorFormatter(Formatter):
    """
    A formatter that colors JSON tokens on top of another formatter.

    Object keys reach the formatter through the same begin_string/end_string
    callbacks as string values. While a key is being written (between
    begin_object_key and end_object_key) the string color is skipped and the
    key is colored as a whole with the theme's object_key style instead.

    A category whose style is empty gets no escape sequence at all, so rendering
    with Theme.none() gives exactly the wrapped formatter's output.

    Args:
        writer (SharedWriter): Stream handle shared with the Serializer
        theme (Theme): Styles per token category; must not change during a render
        formatter (Formatter): Plain formatter producing the JSON text
    """

    def __init__(self, writer: SharedWriter, theme: Theme, formatter: Formatter):
        self.writer = writer
        self.theme = theme
        self.formatter = formatter
        self.writing_key = False

        # Whether the open string value or key span needs a reset when it ends
        self._string_colored = False
        self._key_colored = False

    def _set_color(self, spec: ColorSpec) -> bool:
        """Switch to ``spec`` unless it is empty; return whether anything was set."""
        if spec.is_none():
            return False
        self.writer.set_color(spec)
        return True

    def _reset(self):
        self.writer.reset()
        if not self.theme.reset.is_none():
            self.writer.set_color(self.theme.reset)

    def _write_colored(self, spec: ColorSpec, write, *args):
        """Write a scalar through the wrapped formatter inside a colored span."""
        colored = self._set_color(spec)
        write(self.writer, *args)
        if colored:
            self._reset()

    def reset(self):
        self.writing_key = False
        self._string_colored = False
        self._key_colored = False
        self.formatter.reset()

    # Scalars

    def write_null(self, _writer):
        self._write_colored(self.theme.null, self.formatter.write_null)

    def write_bool(self, _writer, value: bool):
        self._write_colored(self.theme.boolean, self.formatter.write_bool, value)

    def write_number(self, _writer, value):
        self._write_colored(self.theme.number, self.formatter.write_number, value)

    def write_number_str(self, _writer, value: str):
        self._write_colored(self.theme.number, self.formatter.write_number_str, value)

    # Strings are colored once around the quotes, never per fragment

    def begin_string(self, _writer):
        if not self.writing_key:
            self._string_colored = self._set_color(self.theme.string)
        self.formatter.begin_string(self.writer)

    def end_string(self, _writer):
        self.formatter.end_string(self.writer)
        if not self.writing_key and self._string_colored:
            self._string_colored = False
            self._reset()

    def write_string_fragment(self, _writer, fragment: str):
        self.formatter.write_string_fragment(self.writer, fragment)

    def write_char_escape(self, _writer, char: str):
        self.formatter.write_char_escape(self.writer, char)

    # Structure

    def begin_array(self, _writer):
        self.formatter.begin_array(self.writer)

    def end_array(self, _writer):
        self.formatter.end_array(self.writer)

    def begin_array_value(self, _writer, first: bool):
        self.formatter.begin_array_value(self.writer, first)

    def end_array_value(self, _writer):
        self.formatter.end_array_value(self.writer)

    def begin_object(self, _writer):
        self.formatter.begin_object(self.writer)

    def end_object(self, _writer):
        self.formatter.end_object(self.writer)

    def begin_object_key(self, _writer, first: bool):
        self.writing_key = True
        # Separator and indentation come before the key's color
        self.formatter.begin_object_key(self.writer, first)
        self._key_colored = self._set_color(self.theme.object_key)

    def end_object_key(self, _writer):
        if self._key_colored:
            self._key_colored = False
            self._reset()
        self.formatter.end_object_key(self.writer)
        self.writing_key = False

    def begin_object_value(self, _writer):
        self.formatter.begin_object_value(self.writer)

    def end_object_value(self, _writer):
        self.formatter.end_object_value(self.writer)

    def write_raw_fragment(self, _writer, fragment: str):
        self.formatter.write_raw_fragment(self.writer, fragment)
