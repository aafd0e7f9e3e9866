"""
Error type raised by the JSON renderers in this package.

Both kinds of failure, a value that cannot be written as JSON and a stream that
refused a write, surface as the same exception so callers only catch one thing.
"""


class JsonError(Exception):
    """
    Raised when a value could not be rendered as JSON.

    Attributes:
        category (str): ``"data"`` when the value itself was not serializable,
            ``"io"`` when writing to the output stream failed
    """

    IO = "io"
    DATA = "data"

    def __init__(self, message: str, category: str = DATA):
        super().__init__(message)
        self.category = category

    @classmethod
    def io(cls, err: OSError) -> "JsonError":
        """Wrap an I/O failure coming from the output stream."""
        return cls(f"failed to write JSON: {err}", cls.IO)

    def is_io(self) -> bool:
        return self.category == self.IO

    def is_data(self) -> bool:
        return self.category == self.DATA
