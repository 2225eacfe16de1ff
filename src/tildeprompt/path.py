from __future__ import annotations
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from .styles import DARK_THEME, Painter, PlainStyler
from .styles import StyleClass as SC

#: Whether to shorten every component of the path but the last to its first
#: character
ABBREVIATE_INTERMEDIATE_COMPONENTS = True


class Emphasis(Enum):
    """How a `PathSegment` is to be presented"""

    #: The terminal's base style
    ROOT = "root"
    #: Faint; used for separators and for an anchor followed by more components
    DIMMED = "dimmed"
    #: Bold; used for directory names and for a lone anchor
    BOLD = "bold"


@dataclass(frozen=True)
class PathSegment:
    text: str
    emphasis: Emphasis


class Anchor(Enum):
    """The fixed prefix that a displayed path starts from"""

    HOME = "~"
    ROOT_SLASH = ""


@dataclass(frozen=True)
class PathClassification:
    anchor: Anchor

    #: The components of the path after the anchor, outermost first
    remainder: tuple[str, ...]


def classify_path(cwd: PurePath, home: PurePath | None) -> PathClassification:
    """
    Split the absolute path ``cwd`` into an anchor and a remainder.  If
    ``home`` is non-`None` and ``cwd`` is ``home`` or inside it, the path is
    anchored at ``~``; otherwise, it is anchored at the filesystem root.
    """
    if home is not None:
        try:
            rel = cwd.relative_to(home)
        except ValueError:
            pass
        else:
            return PathClassification(Anchor.HOME, rel.parts)
    return PathClassification(Anchor.ROOT_SLASH, cwd.parts[1:])


def format_path(
    cwd: PurePath,
    home: PurePath | None,
    abbreviate: bool = ABBREVIATE_INTERMEDIATE_COMPONENTS,
) -> list[PathSegment]:
    r"""
    Convert the absolute path ``cwd`` into a sequence of `PathSegment`\s, in
    left-to-right order.  If ``abbreviate`` is true, every normal component
    except the last is shortened to its first character.
    """
    cls = classify_path(cwd, home)
    if cls.remainder:
        segments = [PathSegment(cls.anchor.value, Emphasis.DIMMED)]
    else:
        # Nothing follows the anchor, so make sure there's something to see:
        segments = [PathSegment(cls.anchor.value or "/", Emphasis.BOLD)]
    last = len(cls.remainder) - 1
    for i, name in enumerate(cls.remainder):
        segments.append(PathSegment("/", Emphasis.DIMMED))
        if name in (".", ".."):
            segments.append(PathSegment(name, Emphasis.ROOT))
        elif abbreviate and i < last:
            segments.append(PathSegment(name[0], Emphasis.BOLD))
        else:
            segments.append(PathSegment(name, Emphasis.BOLD))
    return segments


EMPHASIS_CLASSES = {
    Emphasis.ROOT: SC.PATH_ROOT,
    Emphasis.DIMMED: SC.PATH_DIMMED,
    Emphasis.BOLD: SC.PATH_BOLD,
}


def render_path(segments: Iterable[PathSegment], paint: Painter) -> str:
    """Join ``segments`` into a single string, styling each per its emphasis"""
    return "".join(
        paint(seg.text, EMPHASIS_CLASSES[seg.emphasis]) for seg in segments
    )


def plain_path(segments: Iterable[PathSegment]) -> str:
    """Join ``segments`` into a single string without any styling"""
    return render_path(segments, Painter(PlainStyler(), DARK_THEME))
