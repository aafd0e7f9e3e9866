"""
This module provides SharedWriter, the single handle through which both the
plain JSON formatter and the color logic reach the output stream.
"""

from typing import Iterable

from termcolor_json.stream import ColorSpec


class SharedWriter:
    """
    Forwards text writes and color commands to one ColorStream.

    The formatter writes JSON text and ColorFormatter switches colors, taking
    turns on the same stream in the order they are issued. Nothing is buffered,
    so the two never reorder each other's output.

    Not thread-safe: it is only used within one render call, where the walk is
    single-threaded and strictly nested. Errors raised by the stream propagate
    unchanged.

    Args:
        stream: The ColorStream (or compatible object) being written to
    """

    __slots__ = ("inner",)

    def __init__(self, stream):
        self.inner = stream

    def write(self, text: str) -> int:
        return self.inner.write(text)

    def write_all(self, text: str):
        """
        Write all of ``text``, retrying after partial writes.

        Raises:
            OSError: If the stream accepts nothing
        """
        while text:
            written = self.inner.write(text)
            if written is None:
                # Streams that return None accept everything in one call
                return
            if written == 0:
                raise OSError("failed to write whole buffer")
            text = text[written:]

    def writelines(self, lines: Iterable[str]):
        self.inner.writelines(lines)

    def flush(self):
        self.inner.flush()

    def supports_color(self) -> bool:
        return self.inner.supports_color()

    def set_color(self, spec: ColorSpec):
        self.inner.set_color(spec)

    def reset(self):
        self.inner.reset()

    def is_synchronous(self) -> bool:
        return self.inner.is_synchronous()
