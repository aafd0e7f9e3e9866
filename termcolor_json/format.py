"""
This module provides the plain JSON formatters used by the Serializer.

A formatter receives one callback per JSON token and writes the matching text
(punctuation, whitespace, literals and escapes) to the writer it is given. It
knows nothing about color; ColorFormatter wraps one to add styling.
"""

# Escape table shared with the json module
from json.encoder import ESCAPE_DCT


def escape_char(char: str) -> str:
    """
    Return the JSON escape for a single character.

    Characters outside the Basic Multilingual Plane become a UTF-16 surrogate
    pair, as JSON has no longer \\u form.
    """
    escaped = ESCAPE_DCT.get(char)
    if escaped is not None:
        return escaped
    n = ord(char)
    if n < 0x10000:
        return "\\u{0:04x}".format(n)
    n -= 0x10000
    high = 0xD800 | ((n >> 10) & 0x3FF)
    low = 0xDC00 | (n & 0x3FF)
    return "\\u{0:04x}\\u{1:04x}".format(high, low)


class Formatter:
    """
    Writes JSON tokens in the compact layout, without any whitespace.

    Subclasses override the callbacks they lay out differently. Every callback
    takes the writer as its first argument, any object with a write(str) method.
    """

    def reset(self):
        """Forget any layout state; called before each document."""

    def write_null(self, writer):
        writer.write("null")

    def write_bool(self, writer, value: bool):
        writer.write("true" if value else "false")

    def write_number(self, writer, value):
        # Same float text as the json module
        if isinstance(value, float):
            writer.write(float.__repr__(value))
        elif isinstance(value, int):
            writer.write(int.__repr__(value))
        else:
            writer.write(str(value))

    def write_number_str(self, writer, value: str):
        writer.write(value)

    def begin_string(self, writer):
        writer.write('"')

    def end_string(self, writer):
        writer.write('"')

    def write_string_fragment(self, writer, fragment: str):
        writer.write(fragment)

    def write_char_escape(self, writer, char: str):
        writer.write(escape_char(char))

    def begin_array(self, writer):
        writer.write("[")

    def end_array(self, writer):
        writer.write("]")

    def begin_array_value(self, writer, first: bool):
        if not first:
            writer.write(",")

    def end_array_value(self, writer):
        pass

    def begin_object(self, writer):
        writer.write("{")

    def end_object(self, writer):
        writer.write("}")

    def begin_object_key(self, writer, first: bool):
        if not first:
            writer.write(",")

    def end_object_key(self, writer):
        pass

    def begin_object_value(self, writer):
        writer.write(":")

    def end_object_value(self, writer):
        pass

    def write_raw_fragment(self, writer, fragment: str):
        writer.write(fragment)


class CompactFormatter(Formatter):
    """Writes JSON with no whitespace, e.g. ``{"a":[1,2]}``."""


class PrettyFormatter(Formatter):
    """
    Writes JSON with one array element or object member per line.

    Empty arrays and objects stay on one line as ``[]`` and ``{}``.

    Args:
        indent (str): Text repeated once per nesting level (default: two spaces)
    """

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self.current_indent = 0
        self.has_value = False

    def reset(self):
        self.current_indent = 0
        self.has_value = False

    def _write_indent(self, writer):
        for _ in range(self.current_indent):
            writer.write(self.indent)

    def begin_array(self, writer):
        self.current_indent += 1
        self.has_value = False
        writer.write("[")

    def end_array(self, writer):
        self.current_indent -= 1
        if self.has_value:
            writer.write("\n")
            self._write_indent(writer)
        writer.write("]")

    def begin_array_value(self, writer, first: bool):
        writer.write("\n" if first else ",\n")
        self._write_indent(writer)

    def end_array_value(self, writer):
        self.has_value = True

    def begin_object(self, writer):
        self.current_indent += 1
        self.has_value = False
        writer.write("{")

    def end_object(self, writer):
        self.current_indent -= 1
        if self.has_value:
            writer.write("\n")
            self._write_indent(writer)
        writer.write("}")

    def begin_object_key(self, writer, first: bool):
        writer.write("\n" if first else ",\n")
        self._write_indent(writer)

    def begin_object_value(self, writer):
        writer.write(": ")

    def end_object_value(self, writer):
        self.has_value = True
