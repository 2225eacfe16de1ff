from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Color(Enum):
    """
    An enumeration of the supported foreground colors.  Each color's value
    equals its xterm number.
    """

    RED = 1
    GREEN = 2
    WHITE = 7

    def asfg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the foreground
        color
        """
        return self.value + 30


@dataclass(frozen=True)
class Style:
    color: Color | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    reverse: bool = False

    def as_params(self) -> list[str]:
        params = []
        if self.color is not None:
            params.append(str(self.color.asfg()))
        if self.bold:
            params.append("1")
        if self.dimmed:
            params.append("2")
        if self.italic:
            params.append("3")
        if self.reverse:
            params.append("7")
        return params


class Styler(Protocol):
    def __call__(self, s: str, style: Style) -> str: ...


class BashStyler:
    """Class for escaping & styling strings for use in Bash's PS1 variable"""

    def __call__(self, s: str, style: Style) -> str:
        r"""
        Return the string ``s`` escaped for use in a PS1 variable and wrapped
        in the SGR escape sequences for ``style``.  All escape sequences are
        wrapped in ``\[ ... \]`` so that Bash does not count them towards the
        width of the prompt.

        :param str s: the string to stylize
        :param Style style: the color & attributes to stylize the string with
        """
        s = self.escape(s)
        if params := style.as_params():
            s = rf"\[\e[{';'.join(params)}m\]{s}\[\e[m\]"
        return s

    def escape(self, s: str) -> str:
        """
        Escape characters in the string ``s`` that have special meaning in a
        PS1 variable
        """
        return s.replace("\\", r"\\")


class ANSIStyler:
    """Class for styling strings for display immediately in the terminal"""

    def __call__(self, s: str, style: Style) -> str:
        """
        Stylize the string ``s`` with ANSI escape sequences

        :param str s: the string to stylize
        :param Style style: the color & attributes to stylize the string with
        """
        if params := style.as_params():
            s = f"\x1B[{';'.join(params)}m{s}\x1B[m"
        return s


class ZshStyler:
    """Class for escaping & styling strings for use in zsh's PS1 variable"""

    def __call__(self, s: str, style: Style) -> str:
        """
        Return the string ``s`` escaped for use in a zsh PS1 variable and
        wrapped in the prompt sequences for ``style``.  Attributes that zsh has
        no prompt sequence for (dim & italic) are emitted as raw SGR codes
        inside ``%{ ... %}``.

        :param str s: the string to stylize
        :param Style style: the color & attributes to stylize the string with
        """
        s = self.escape(s)
        extra = [p for p, on in (("2", style.dimmed), ("3", style.italic)) if on]
        if extra:
            s = f"%{{\x1B[{';'.join(extra)}m%}}{s}%{{\x1B[22;23m%}}"
        if style.reverse:
            s = f"%S{s}%s"
        if style.bold:
            s = f"%B{s}%b"
        if style.color is not None:
            s = f"%F{{{style.color.value}}}{s}%f"
        return s

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")


class PlainStyler:
    """Class for outputting strings without any styling, e.g., for titles"""

    def __call__(self, s: str, style: Style) -> str:
        return s


StyleClass = Enum(
    "StyleClass",
    [
        "HOST",
        "HOST_SSH",
        "USER",
        "PATH_ROOT",
        "PATH_DIMMED",
        "PATH_BOLD",
        "GIT_STATE",
        "GIT_STATE_MULTI",
        "PROMPT_WRITABLE",
        "PROMPT_READONLY",
        "PROMPT_UNKNOWN",
    ],
)

Theme = dict[StyleClass, Style]

DARK_THEME = {
    StyleClass.HOST: Style(italic=True),
    StyleClass.HOST_SSH: Style(Color.RED, bold=True, italic=True),
    StyleClass.USER: Style(),
    StyleClass.PATH_ROOT: Style(),
    StyleClass.PATH_DIMMED: Style(Color.WHITE, dimmed=True),
    StyleClass.PATH_BOLD: Style(bold=True),
    StyleClass.GIT_STATE: Style(Color.RED, bold=True),
    StyleClass.GIT_STATE_MULTI: Style(Color.RED, bold=True, reverse=True),
    StyleClass.PROMPT_WRITABLE: Style(Color.GREEN),
    StyleClass.PROMPT_READONLY: Style(Color.RED),
    StyleClass.PROMPT_UNKNOWN: Style(),
}

LIGHT_THEME = DARK_THEME | {
    StyleClass.PATH_DIMMED: Style(dimmed=True),
    StyleClass.PROMPT_WRITABLE: Style(Color.GREEN, bold=True),
}

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


@dataclass
class Painter:
    styler: Styler
    theme: Theme

    def __call__(self, s: str, klass: StyleClass) -> str:
        return self.styler(s, self.theme[klass])
