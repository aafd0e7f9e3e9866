"""
Themes map each kind of JSON token to the terminal style it is rendered in.
"""

from typing import Optional

from termcolor_json.stream import ColorSpec


class Theme:
    """
    Controls the style used for each JSON token category.

    Every category holds its own ColorSpec. The getters return the live spec, so
    a theme can be tweaked in place before rendering:

        >>> theme = Theme.default()
        >>> theme.number.set_fg("yellow")
        ColorSpec(fg='yellow', bg=None)

    A reasonable default is provided by Theme.default(); Theme.none() styles
    nothing and renders plain JSON.

    Args:
        spec: Style given to every category (default: no style)
        reset: Style applied after each colored token, on top of the terminal's
            plain reset (default: plain reset only)
    """

    def __init__(self, spec: Optional[ColorSpec] = None, *, reset: Optional[ColorSpec] = None):
        spec = spec if spec is not None else ColorSpec()
        self._null = spec.copy()
        self._boolean = spec.copy()
        self._number = spec.copy()
        self._string = spec.copy()
        self._object_key = spec.copy()
        self._reset = reset.copy() if reset is not None else ColorSpec()

    @classmethod
    def none(cls) -> "Theme":
        """Create a theme with no styling."""
        return cls()

    @classmethod
    def default(cls) -> "Theme":
        """Create the built-in theme."""
        theme = cls.none()
        theme.null.set_fg("cyan").set_bold(True)
        theme.boolean.set_fg("cyan").set_bold(True)
        theme.number.set_fg("cyan")
        theme.string.set_fg("green")
        theme.object_key.set_fg("blue").set_intense(True)
        return theme

    @property
    def null(self) -> ColorSpec:
        """Style of the ``null`` token."""
        return self._null

    @null.setter
    def null(self, spec: ColorSpec):
        self._null = spec

    @property
    def boolean(self) -> ColorSpec:
        """Style of the ``true`` and ``false`` tokens."""
        return self._boolean

    @boolean.setter
    def boolean(self, spec: ColorSpec):
        self._boolean = spec

    @property
    def number(self) -> ColorSpec:
        return self._number

    @number.setter
    def number(self, spec: ColorSpec):
        self._number = spec

    @property
    def string(self) -> ColorSpec:
        """
        Style of string values.

        Object keys are not affected; they use object_key instead.
        """
        return self._string

    @string.setter
    def string(self, spec: ColorSpec):
        self._string = spec

    @property
    def object_key(self) -> ColorSpec:
        return self._object_key

    @object_key.setter
    def object_key(self, spec: ColorSpec):
        self._object_key = spec

    @property
    def reset(self) -> ColorSpec:
        return self._reset

    @reset.setter
    def reset(self, spec: ColorSpec):
        self._reset = spec

    def copy(self) -> "Theme":
        theme = Theme(reset=self._reset)
        theme.null = self._null.copy()
        theme.boolean = self._boolean.copy()
        theme.number = self._number.copy()
        theme.string = self._string.copy()
        theme.object_key = self._object_key.copy()
        return theme

    def _specs(self):
        return (
            self._null,
            self._boolean,
            self._number,
            self._string,
            self._object_key,
            self._reset,
        )

    def __eq__(self, other):
        if not isinstance(other, Theme):
            return NotImplemented
        return self._specs() == other._specs()

    def __repr__(self):
        return (
            f"Theme(null={self._null!r}, boolean={self._boolean!r}, "
            f"number={self._number!r}, string={self._string!r}, "
            f"object_key={self._object_key!r}, reset={self._reset!r})"
        )
