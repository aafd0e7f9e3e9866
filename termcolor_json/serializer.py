"""
This module walks Python values and turns them into formatter callbacks.

The Serializer owns the structure of the document (which container is open,
where strings need escaping) while the formatter decides what text each token
becomes. Swapping the formatter changes the layout or adds color without
touching the walk.
"""

import math
import sys
from collections.abc import Mapping
from contextlib import contextmanager
from decimal import Decimal
from json.encoder import ESCAPE, ESCAPE_ASCII
from typing import Any, Callable, Optional

# Import colored text functionality for debug output
from termcolor import cprint

from termcolor_json.errors import JsonError
from termcolor_json.format import CompactFormatter, Formatter


class RawValue:
    """
    Pre-serialized JSON embedded as is in the output.

    The text is not validated; it is written verbatim and never colored.
    """

    def __init__(self, json_text: str):
        self.json_text = json_text

    def __repr__(self):
        return f"RawValue({self.json_text!r})"


class Serializer:
    """
    Serializes Python values as JSON through a formatter.

    Supported values are None, bool, int, float, Decimal, str, mappings, lists,
    tuples and RawValue. Anything else goes through ``default`` when given.

    Args:
        writer: Object with a write(str) method receiving the JSON text
        formatter: Formatter deciding the layout (default: compact)
        default: Called with an unsupported value; must return a supported one
        sort_keys: Write object members sorted by key instead of in insertion order
        ensure_ascii: Escape every non-ASCII character in strings
        check_circular: Detect containers that contain themselves
        debug: Print walk events to stderr
    """

    def __init__(
        self,
        writer,
        formatter: Optional[Formatter] = None,
        *,
        default: Optional[Callable[[Any], Any]] = None,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
        check_circular: bool = True,
        debug: bool = False,
    ):
        self.writer = writer
        self.formatter = formatter if formatter is not None else CompactFormatter()
        self.default = default
        self.sort_keys = sort_keys
        self.escape = ESCAPE_ASCII if ensure_ascii else ESCAPE
        self.check_circular = check_circular
        self.debug_on = debug
        self._markers = set()

    def debug(self, caller: str, value: Any):
        """Print debug information if debug mode is enabled."""
        if self.debug_on:
            cprint(caller, "green", end=" ", file=sys.stderr)
            cprint(repr(value), "blue", file=sys.stderr)

    def serialize(self, value: Any):
        """
        Write one complete JSON document for ``value``.

        Raises:
            JsonError: If the value cannot be represented as JSON
            OSError: If the writer fails; raised unchanged
            RecursionError: If the value is nested too deeply
        """
        self._markers.clear()
        # A previous document may have stopped halfway through
        self.formatter.reset()
        self._serialize_value(value)

    def _serialize_value(self, value: Any):
        formatter, writer = self.formatter, self.writer

        # bool is a subclass of int, so it is tested first
        if value is None:
            formatter.write_null(writer)
        elif value is True or value is False:
            formatter.write_bool(writer, value)
        elif isinstance(value, int):
            formatter.write_number(writer, value)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise JsonError(f"Float value is not finite: {value!r}")
            formatter.write_number(writer, value)
        elif isinstance(value, Decimal):
            if not value.is_finite():
                raise JsonError(f"Decimal value is not finite: {value!r}")
            formatter.write_number_str(writer, str(value))
        elif isinstance(value, str):
            self._serialize_str(value)
        elif isinstance(value, RawValue):
            formatter.write_raw_fragment(writer, value.json_text)
        elif isinstance(value, Mapping):
            with self._marker(value):
                self._serialize_map(value)
        elif isinstance(value, (list, tuple)):
            with self._marker(value):
                self._serialize_seq(value)
        elif self.default is not None:
            self.debug("[serialize] default for", type(value).__name__)
            with self._marker(value):
                self._serialize_value(self.default(value))
        else:
            raise JsonError(f"Object of type {type(value).__name__} is not JSON serializable")

    def _serialize_str(self, value: str):
        formatter, writer = self.formatter, self.writer
        formatter.begin_string(writer)

        # Write unescaped runs as fragments, escaping one character at a time
        start = 0
        for match in self.escape.finditer(value):
            if match.start() > start:
                formatter.write_string_fragment(writer, value[start:match.start()])
            formatter.write_char_escape(writer, match.group())
            start = match.end()
        if start < len(value):
            formatter.write_string_fragment(writer, value[start:])

        formatter.end_string(writer)

    def _serialize_seq(self, value):
        formatter, writer = self.formatter, self.writer
        self.debug("[serialize_seq] length", len(value))

        formatter.begin_array(writer)
        for index, item in enumerate(value):
            formatter.begin_array_value(writer, index == 0)
            self._serialize_value(item)
            formatter.end_array_value(writer)
        formatter.end_array(writer)

    def _serialize_map(self, value: Mapping):
        formatter, writer = self.formatter, self.writer
        self.debug("[serialize_map] keys", list(value.keys()))

        items = [(self._key_to_str(key), item) for key, item in value.items()]
        if self.sort_keys:
            items.sort(key=lambda pair: pair[0])

        formatter.begin_object(writer)
        for index, (key, item) in enumerate(items):
            formatter.begin_object_key(writer, index == 0)
            self._serialize_str(key)
            formatter.end_object_key(writer)
            formatter.begin_object_value(writer)
            self._serialize_value(item)
            formatter.end_object_value(writer)
        formatter.end_object(writer)

    @staticmethod
    def _key_to_str(key: Any) -> str:
        """
        Convert a mapping key to the string written as the JSON key.

        Raises:
            JsonError: If the key is not a str, bool, int or finite float
        """
        if isinstance(key, str):
            return key
        if key is True or key is False:
            return "true" if key else "false"
        if isinstance(key, int):
            return int.__repr__(key)
        if isinstance(key, float):
            if not math.isfinite(key):
                raise JsonError(f"Float key is not finite: {key!r}")
            return float.__repr__(key)
        raise JsonError(f"Keys must be str, int, float or bool, not {type(key).__name__}")

    @contextmanager
    def _marker(self, container: Any):
        """Mark a container as open while the walk is inside it."""
        if not self.check_circular:
            yield
            return
        marker = id(container)
        if marker in self._markers:
            raise JsonError("Circular reference detected")
        self._markers.add(marker)
        try:
            yield
        finally:
            self._markers.discard(marker)
