from __future__ import annotations
from pathlib import PurePosixPath
import pytest
from tildeprompt.path import (
    Anchor,
    Emphasis,
    PathClassification,
    PathSegment,
    classify_path,
    format_path,
    plain_path,
    render_path,
)
from tildeprompt.styles import DARK_THEME, ANSIStyler, Painter

B = Emphasis.BOLD
D = Emphasis.DIMMED
R = Emphasis.ROOT
SEP = PathSegment("/", D)


@pytest.mark.parametrize(
    "cwd,home,cls",
    [
        ("/home/alice/proj/src", "/home/alice", (Anchor.HOME, ("proj", "src"))),
        ("/home/alice", "/home/alice", (Anchor.HOME, ())),
        ("/home/alice2/x", "/home/alice", (Anchor.ROOT_SLASH, ("home", "alice2", "x"))),
        ("/usr/lib", None, (Anchor.ROOT_SLASH, ("usr", "lib"))),
        ("/", "/home/alice", (Anchor.ROOT_SLASH, ())),
        ("/", None, (Anchor.ROOT_SLASH, ())),
    ],
)
def test_classify_path(
    cwd: str, home: str | None, cls: tuple[Anchor, tuple[str, ...]]
) -> None:
    h = PurePosixPath(home) if home is not None else None
    assert classify_path(PurePosixPath(cwd), h) == PathClassification(*cls)


@pytest.mark.parametrize(
    "cwd,home,segments",
    [
        pytest.param(
            "/home/alice/proj/src",
            "/home/alice",
            [PathSegment("~", D), SEP, PathSegment("p", B), SEP, PathSegment("src", B)],
            id="under-home",
        ),
        pytest.param(
            "/home/alice",
            "/home/alice",
            [PathSegment("~", B)],
            id="home",
        ),
        pytest.param("/", "/home/alice", [PathSegment("/", B)], id="root"),
        pytest.param("/", None, [PathSegment("/", B)], id="root-no-home"),
        pytest.param(
            "/usr/local/lib",
            None,
            [
                PathSegment("", D),
                SEP,
                PathSegment("u", B),
                SEP,
                PathSegment("l", B),
                SEP,
                PathSegment("lib", B),
            ],
            id="no-home",
        ),
        pytest.param(
            "/var",
            "/home/alice",
            [PathSegment("", D), SEP, PathSegment("var", B)],
            id="single-component",
        ),
        pytest.param(
            "/home/alice/../bob",
            "/home/alice",
            [PathSegment("~", D), SEP, PathSegment("..", R), SEP, PathSegment("bob", B)],
            id="parent-marker",
        ),
        pytest.param(
            "/srv/data/..",
            None,
            [
                PathSegment("", D),
                SEP,
                PathSegment("s", B),
                SEP,
                PathSegment("d", B),
                SEP,
                PathSegment("..", R),
            ],
            id="trailing-parent-marker",
        ),
        pytest.param(
            "/home/alice/ñandú/src",
            "/home/alice",
            [PathSegment("~", D), SEP, PathSegment("ñ", B), SEP, PathSegment("src", B)],
            id="non-ascii",
        ),
    ],
)
def test_format_path(cwd: str, home: str | None, segments: list[PathSegment]) -> None:
    h = PurePosixPath(home) if home is not None else None
    assert format_path(PurePosixPath(cwd), h) == segments


def test_format_path_no_abbreviate() -> None:
    segments = format_path(
        PurePosixPath("/home/alice/proj/src/pkg"),
        PurePosixPath("/home/alice"),
        abbreviate=False,
    )
    assert plain_path(segments) == "~/proj/src/pkg"


def test_format_path_is_repeatable() -> None:
    cwd = PurePosixPath("/home/alice/proj/src")
    home = PurePosixPath("/home/alice")
    assert format_path(cwd, home) == format_path(cwd, home)


@pytest.mark.parametrize(
    "parts",
    [
        ("a",),
        ("alpha", "beta"),
        ("alpha", "beta", "gamma", "delta"),
    ],
)
def test_format_path_segment_counts(parts: tuple[str, ...]) -> None:
    segments = format_path(PurePosixPath("/", *parts), None)
    assert segments[0] == PathSegment("", D)
    rest = segments[1:]
    assert len(rest) == 2 * len(parts)
    assert rest[::2] == [SEP] * len(parts)
    assert [s.text for s in rest[1::2]] == [p[0] for p in parts[:-1]] + [parts[-1]]


@pytest.mark.parametrize(
    "cwd,home,plain",
    [
        ("/home/alice/proj/src", "/home/alice", "~/p/src"),
        ("/home/alice", "/home/alice", "~"),
        ("/usr/local/lib", "/home/alice", "/u/l/lib"),
        ("/", None, "/"),
    ],
)
def test_plain_path(cwd: str, home: str | None, plain: str) -> None:
    h = PurePosixPath(home) if home is not None else None
    assert plain_path(format_path(PurePosixPath(cwd), h)) == plain


def test_render_path_ansi() -> None:
    paint = Painter(ANSIStyler(), DARK_THEME)
    segments = format_path(
        PurePosixPath("/home/alice/proj/src"), PurePosixPath("/home/alice")
    )
    assert render_path(segments, paint) == (
        "\x1B[37;2m~\x1B[m"
        "\x1B[37;2m/\x1B[m"
        "\x1B[1mp\x1B[m"
        "\x1B[37;2m/\x1B[m"
        "\x1B[1msrc\x1B[m"
    )


def test_render_path_lone_root_ansi() -> None:
    paint = Painter(ANSIStyler(), DARK_THEME)
    segments = format_path(PurePosixPath("/"), None)
    assert render_path(segments, paint) == "\x1B[1m/\x1B[m"


def test_render_path_parent_marker_unstyled() -> None:
    paint = Painter(ANSIStyler(), DARK_THEME)
    segments = format_path(PurePosixPath("/srv/.."), None)
    assert render_path(segments, paint) == (
        "\x1B[37;2m\x1B[m"
        "\x1B[37;2m/\x1B[m"
        "\x1B[1ms\x1B[m"
        "\x1B[37;2m/\x1B[m"
        ".."
    )
