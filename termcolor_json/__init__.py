"""
termcolor-json writes JSON to a terminal with each kind of token colored.
This module serves as the main entry point for the library, exposing the core
components needed by users.
"""

# Import the renderers, which write one JSON document to a color stream
from termcolor_json.main import (
    highlight_values,
    render,
    render_compact,
    render_to_string,
    render_with_theme,
    render_with_theme_and_layout,
)
# Import styling: per-token themes and the terminal stream they are applied to
from termcolor_json.theme import Theme
from termcolor_json.stream import ColorChoice, ColorSpec, ColorStream
# Import the plain JSON layouts that can be passed to the renderers
from termcolor_json.format import CompactFormatter, Formatter, PrettyFormatter
from termcolor_json.serializer import RawValue, Serializer
from termcolor_json.color_formatter import ColorFormatter
from termcolor_json.writer import SharedWriter
from termcolor_json.errors import JsonError
