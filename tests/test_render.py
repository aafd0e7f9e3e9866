"""Tests for colored rendering through ColorFormatter and the entry points."""

import io
import os
import re
import unittest
import unittest.mock
from io import StringIO

from termcolor_json import (
    ColorChoice,
    ColorSpec,
    ColorStream,
    CompactFormatter,
    JsonError,
    PrettyFormatter,
    RawValue,
    Serializer,
    Theme,
    highlight_values,
    render,
    render_compact,
    render_to_string,
    render_with_theme,
    render_with_theme_and_layout,
)

RESET = "\x1b[0m"
KEY = "\x1b[94m"
STRING = "\x1b[32m"
NUMBER = "\x1b[36m"
BOOL = "\x1b[1m\x1b[36m"
NULL = "\x1b[1m\x1b[36m"

VALUES = [
    None,
    True,
    -7,
    2.5,
    "plain",
    'esc"aped\né',
    [],
    {},
    [1, "two", None, [False, {"k": []}]],
    {"b": True, "m": 1, "n": None, "s": "v", "nested": {"a": [1.5, "x"], "e": {}}},
    {1: "int key", "raw": RawValue("[1, 2]")},
]

# One colored span: set sequences, the literal, then a reset
SPAN = re.compile(r"((?:\x1b\[(?!0m)[0-9;]+m)+)([^\x1b]*)\x1b\[0m")
LITERAL = re.compile(r'^("(?:[^"\\]|\\.)*"|true|false|null|-?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)$')


def plain(value, formatter) -> str:
    buf = StringIO()
    Serializer(buf, formatter).serialize(value)
    return buf.getvalue()


def colored(value, theme=None, formatter=None) -> str:
    buf = StringIO()
    stream = ColorStream(buf, ColorChoice.ALWAYS)
    render_with_theme_and_layout(
        value,
        stream,
        theme if theme is not None else Theme.default(),
        formatter if formatter is not None else CompactFormatter(),
    )
    return buf.getvalue()


class FailingStream:
    """Color stream whose writes fail after a number of characters."""

    def __init__(self, color=True, fail_on_color=False):
        self.color = color
        self.fail_on_color = fail_on_color

    def supports_color(self):
        return self.color

    def is_synchronous(self):
        return False

    def set_color(self, spec):
        if self.fail_on_color:
            raise OSError("terminal gone")

    def reset(self):
        pass

    def write(self, text):
        if not self.fail_on_color:
            raise OSError("broken pipe")
        return len(text)


class PassThroughTests(unittest.TestCase):
    """Without color support the output is the plain formatter's output."""

    def test_pretty(self) -> None:
        for value in VALUES:
            buf = StringIO()
            render(value, ColorStream(buf, ColorChoice.NEVER))
            self.assertEqual(buf.getvalue(), plain(value, PrettyFormatter()))

    def test_compact(self) -> None:
        for value in VALUES:
            buf = StringIO()
            render_compact(value, ColorStream(buf, ColorChoice.NEVER))
            self.assertEqual(buf.getvalue(), plain(value, CompactFormatter()))

    def test_custom_layout(self) -> None:
        buf = StringIO()
        stream = ColorStream(buf, ColorChoice.NEVER)
        render_with_theme_and_layout({"a": [1]}, stream, Theme.default(), PrettyFormatter("\t"))
        self.assertEqual(buf.getvalue(), '{\n\t"a": [\n\t\t1\n\t]\n}')


class NoOpThemeTests(unittest.TestCase):
    """With an empty theme a color stream receives no escape sequences."""

    def test_pretty(self) -> None:
        for value in VALUES:
            buf = StringIO()
            render_with_theme(value, ColorStream(buf, ColorChoice.ALWAYS), Theme.none())
            self.assertEqual(buf.getvalue(), plain(value, PrettyFormatter()))

    def test_compact(self) -> None:
        for value in VALUES:
            out = colored(value, Theme.none())
            self.assertEqual(out, plain(value, CompactFormatter()))

    def test_single_empty_category(self) -> None:
        theme = Theme.default()
        theme.object_key.clear()
        self.assertEqual(colored({"k": 1}, theme), '{"k":' + NUMBER + "1" + RESET + "}")


class ColorSpanTests(unittest.TestCase):
    """Every colored span covers exactly one literal and ends in a reset."""

    def assert_spans(self, out: str) -> None:
        spans = SPAN.findall(out)
        self.assertTrue(spans)
        for _, literal in spans:
            self.assertRegex(literal, LITERAL)
        # Removing the spans' escape sequences leaves no escape behind
        stripped = SPAN.sub(lambda m: m.group(2), out)
        self.assertNotIn("\x1b", stripped)

    def test_compact(self) -> None:
        for value in VALUES[:6] + VALUES[8:]:
            out = colored(value)
            self.assert_spans(out)
            self.assertEqual(SPAN.sub(lambda m: m.group(2), out), plain(value, CompactFormatter()))

    def test_pretty(self) -> None:
        for value in VALUES[:6] + VALUES[8:]:
            out = colored(value, formatter=PrettyFormatter())
            self.assert_spans(out)
            self.assertEqual(SPAN.sub(lambda m: m.group(2), out), plain(value, PrettyFormatter()))

    def test_example_document(self) -> None:
        out = colored({"b": True, "m": 1, "n": None, "s": "v"})
        expected = (
            "{"
            + KEY + '"b"' + RESET + ":" + BOOL + "true" + RESET + ","
            + KEY + '"m"' + RESET + ":" + NUMBER + "1" + RESET + ","
            + KEY + '"n"' + RESET + ":" + NULL + "null" + RESET + ","
            + KEY + '"s"' + RESET + ":" + STRING + '"v"' + RESET
            + "}"
        )
        self.assertEqual(out, expected)

    def test_string_with_escapes_is_one_span(self) -> None:
        self.assertEqual(colored('a\nb"'), STRING + '"a\\nb\\""' + RESET)

    def test_array(self) -> None:
        self.assertEqual(
            colored([True, None, 2.5]),
            "[" + BOOL + "true" + RESET + "," + NULL + "null" + RESET + "," + NUMBER + "2.5" + RESET + "]",
        )

    def test_raw_value_uncolored(self) -> None:
        self.assertEqual(colored(RawValue("[1]")), "[1]")


class KeyValueTests(unittest.TestCase):
    """Object keys use the key style, string values the string style."""

    def test_compact(self) -> None:
        self.assertEqual(
            colored({"k": "v"}),
            "{" + KEY + '"k"' + RESET + ":" + STRING + '"v"' + RESET + "}",
        )

    def test_pretty(self) -> None:
        self.assertEqual(
            colored({"k": "v"}, formatter=PrettyFormatter()),
            "{\n  " + KEY + '"k"' + RESET + ": " + STRING + '"v"' + RESET + "\n}",
        )

    def test_key_never_gets_string_color(self) -> None:
        out = colored({"k": {"k2": "v"}})
        self.assertNotIn(STRING + '"k', out)
        self.assertNotIn(KEY + STRING, out)
        self.assertIn(KEY + '"k2"' + RESET, out)

    def test_non_string_key(self) -> None:
        self.assertEqual(
            colored({1: "a"}),
            "{" + KEY + '"1"' + RESET + ":" + STRING + '"a"' + RESET + "}",
        )


class ThemeResetTests(unittest.TestCase):
    """A non-empty reset style follows every reset."""

    def test_reset_style(self) -> None:
        theme = Theme.none()
        theme.number = ColorSpec("red")
        theme.reset = ColorSpec("white")
        self.assertEqual(colored([1], theme), "[\x1b[31m1" + RESET + "\x1b[97m]")

    def test_theme_not_mutated(self) -> None:
        theme = Theme.default()
        colored({"a": 1}, theme)
        self.assertEqual(theme, Theme.default())


class RepeatTests(unittest.TestCase):
    """Rendering the same value twice gives the same text."""

    def test_repeat_render(self) -> None:
        value = VALUES[9]
        for theme in (Theme.none(), Theme.default()):
            formatter = PrettyFormatter()
            self.assertEqual(colored(value, theme, formatter), colored(value, theme, formatter))


class ErrorTests(unittest.TestCase):
    """Failures surface as JsonError."""

    def test_io_error_while_writing_json(self) -> None:
        for color in (True, False):
            with self.assertRaises(JsonError) as ctx:
                render({"a": 1}, FailingStream(color=color))
            self.assertTrue(ctx.exception.is_io())
            self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_io_error_while_writing_color(self) -> None:
        with self.assertRaises(JsonError) as ctx:
            render_compact([1], FailingStream(fail_on_color=True))
        self.assertTrue(ctx.exception.is_io())

    def test_data_error_keeps_partial_output(self) -> None:
        buf = StringIO()
        with self.assertRaises(JsonError) as ctx:
            render_compact([1, float("nan")], ColorStream(buf, ColorChoice.ALWAYS))
        self.assertTrue(ctx.exception.is_data())
        self.assertEqual(buf.getvalue(), "[" + NUMBER + "1" + RESET + ",")

    def test_unencodable_text(self) -> None:
        for choice in (ColorChoice.ALWAYS, ColorChoice.NEVER):
            file = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
            with self.assertRaises(JsonError) as ctx:
                render({"k": "\u00e9"}, ColorStream(file, choice))
            self.assertTrue(ctx.exception.is_io())
            self.assertIsInstance(ctx.exception.__cause__, UnicodeEncodeError)

    def test_deep_nesting(self) -> None:
        value = []
        for _ in range(5000):
            value = [value]
        with self.assertRaises(JsonError) as ctx:
            render_to_string(value, color=False)
        self.assertTrue(ctx.exception.is_data())
        self.assertIsInstance(ctx.exception.__cause__, RecursionError)


class ReuseAfterErrorTests(unittest.TestCase):
    """A formatter that saw a failed render lays out the next one normally."""

    def test_pretty_formatter(self) -> None:
        formatter = PrettyFormatter()
        for theme in (Theme.default(), Theme.none()):
            with self.assertRaises(JsonError):
                colored({"a": [float("nan")]}, theme, formatter)
            self.assertEqual(
                colored({"a": 1}, theme, formatter),
                colored({"a": 1}, theme, PrettyFormatter()),
            )

    def test_failure_in_nested_object(self) -> None:
        formatter = PrettyFormatter()
        with self.assertRaises(JsonError):
            colored({"a": {(1, 2): 3}}, formatter=formatter)
        self.assertEqual(
            colored({"k": "v"}, formatter=formatter),
            "{\n  " + KEY + '"k"' + RESET + ": " + STRING + '"v"' + RESET + "\n}",
        )


class RenderToStringTests(unittest.TestCase):
    """Tests for render_to_string."""

    def test_plain(self) -> None:
        self.assertEqual(render_to_string({"a": [1]}, color=False), '{\n  "a": [\n    1\n  ]\n}')

    def test_colored_compact(self) -> None:
        self.assertEqual(
            render_to_string([None], formatter=CompactFormatter()),
            "[" + NULL + "null" + RESET + "]",
        )

    def test_options_forwarded(self) -> None:
        self.assertEqual(
            render_to_string({"b": 1, "a": 2}, color=False, formatter=CompactFormatter(), sort_keys=True),
            '{"a":2,"b":1}',
        )


class HighlightValuesTests(unittest.TestCase):
    """Tests for highlight_values."""

    def test_plain_file(self) -> None:
        buf = StringIO()
        with unittest.mock.patch.dict(os.environ, {}, clear=True):
            highlight_values({"name": "John", "scores": [95, 87]}, buf)
        self.assertEqual(
            buf.getvalue(),
            '{\n  "name": "John",\n  "scores": [\n    95,\n    87\n  ]\n}\n',
        )

    def test_force_color(self) -> None:
        buf = StringIO()
        with unittest.mock.patch.dict(os.environ, {"FORCE_COLOR": "1"}, clear=True):
            highlight_values({"k": "v"}, buf)
        self.assertEqual(
            buf.getvalue(),
            "{\n  " + KEY + '"k"' + RESET + ": " + STRING + '"v"' + RESET + "\n}\n",
        )
