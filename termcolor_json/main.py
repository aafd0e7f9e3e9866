"""
Entry points for rendering Python values as colored JSON.

Each renderer writes one JSON document to a ColorStream. When the stream does
not support color, the value goes straight through the plain formatter and the
output is ordinary JSON; otherwise a ColorFormatter wraps the formatter and
styles every literal with the theme.
"""

import io
import sys
from typing import Any, Optional

from termcolor_json.color_formatter import ColorFormatter
from termcolor_json.errors import JsonError
from termcolor_json.format import CompactFormatter, Formatter, PrettyFormatter
from termcolor_json.serializer import Serializer
from termcolor_json.stream import ColorChoice, ColorStream
from termcolor_json.theme import Theme
from termcolor_json.writer import SharedWriter


def render(value: Any, stream: ColorStream, **options):
    """
    Write ``value`` as colored, pretty-printed JSON using the default theme.

    Args:
        value: Any JSON-serializable Python object
        stream: Stream to write to
        **options: Serializer options (default, sort_keys, ensure_ascii,
            check_circular, debug)

    Raises:
        JsonError: If the value is not serializable or the stream fails

    Example:
        >>> stream = ColorStream(choice=ColorChoice.ALWAYS)
        >>> render({"string": "value", "number": 123, "bool": True, "null": None}, stream)
    """
    render_with_theme_and_layout(value, stream, Theme.default(), PrettyFormatter(), **options)


def render_compact(value: Any, stream: ColorStream, **options):
    """Write ``value`` as colored, compact JSON using the default theme."""
    render_with_theme_and_layout(value, stream, Theme.default(), CompactFormatter(), **options)


def render_with_theme(value: Any, stream: ColorStream, theme: Theme, **options):
    """Write ``value`` as colored, pretty-printed JSON using ``theme``."""
    render_with_theme_and_layout(value, stream, theme, PrettyFormatter(), **options)


def render_with_theme_and_layout(
    value: Any,
    stream: ColorStream,
    theme: Theme,
    formatter: Formatter,
    **options,
):
    """
    Write ``value`` as colored JSON using ``theme`` and ``formatter``.

    The formatter decides the layout; to indent with tabs, for instance, pass
    ``PrettyFormatter("\\t")``. The theme is copied, so changing it while a
    render is in progress has no effect on that render.

    Args:
        value: Any JSON-serializable Python object
        stream: Stream to write to
        theme: Styles per token category
        formatter: Plain formatter producing the JSON text
        **options: Serializer options

    Raises:
        JsonError: If the value is not serializable, is nested too deeply, or the
            stream fails to write or encode the text. Output written before the
            failure is left in the stream.
    """
    try:
        if not stream.supports_color():
            # No color: the plain formatter writes straight to the stream
            Serializer(stream, formatter, **options).serialize(value)
        else:
            writer = SharedWriter(stream)
            color_formatter = ColorFormatter(writer, theme.copy(), formatter)
            Serializer(writer, color_formatter, **options).serialize(value)
    except (OSError, UnicodeError) as err:
        # UnicodeError: the stream could not encode the text
        raise JsonError.io(err) from err
    except RecursionError as err:
        raise JsonError("Value is nested too deeply") from err


def render_to_string(
    value: Any,
    *,
    theme: Optional[Theme] = None,
    formatter: Optional[Formatter] = None,
    color: bool = True,
    **options,
) -> str:
    """
    Render ``value`` and return the text instead of writing it to a stream.

    Args:
        value: Any JSON-serializable Python object
        theme: Styles per token category (default: Theme.default())
        formatter: Layout (default: PrettyFormatter())
        color: Include escape sequences
        **options: Serializer options

    Returns:
        str: The JSON text, with escape sequences when ``color`` is true
    """
    buffer = io.StringIO()
    stream = ColorStream(buffer, ColorChoice.ALWAYS if color else ColorChoice.NEVER)
    render_with_theme_and_layout(
        value,
        stream,
        theme if theme is not None else Theme.default(),
        formatter if formatter is not None else PrettyFormatter(),
        **options,
    )
    return buffer.getvalue()


def highlight_values(value: Any, file=None):
    """
    Pretty-print a JSON-like value with colored highlighting.

    Color is used when the output is a terminal that supports it, following
    NO_COLOR and FORCE_COLOR. A newline follows the document.

    Args:
        value: Any JSON-serializable Python object
        file: Text file to print to (default: sys.stdout)

    Example:
        >>> data = {"name": "John", "scores": [95, 87, 91]}
        >>> highlight_values(data)
        {
          "name": "John",
          "scores": [
            95,
            87,
            91
          ]
        }
    """
    stream = ColorStream(file if file is not None else sys.stdout)
    render(value, stream)
    stream.write("\n")
    stream.flush()
