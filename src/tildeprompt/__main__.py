from __future__ import annotations
import argparse
import logging
from . import __version__
from .git import git_head
from .info import PromptInfo, title
from .styles import THEMES, ANSIStyler, BashStyler, Painter, ZshStyler


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print a compact, Git-aware shell prompt"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--right",
        action="store_true",
        help="Output the current Git HEAD & commit subject for a right prompt",
    )
    mode.add_argument(
        "--title",
        action="store_true",
        help="Output a string for use as the terminal window title",
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format prompt for direct display (default)",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format prompt for Bash's PS1",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log why any part of the prompt could not be determined",
    )
    parser.add_argument(
        "--no-abbreviate",
        dest="abbreviate",
        action="store_false",
        help="Show every directory in the path in full",
    )
    parser.add_argument(
        "-T",
        "--theme",
        choices=list(THEMES.keys()),
        default="dark",
        help="Select the color theme to use  [default: dark]",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    if args.title:
        s = title(abbreviate=args.abbreviate)
    elif args.right:
        s = git_head()
    else:
        styler = (args.stylecls or ANSIStyler)()
        paint = Painter(styler=styler, theme=THEMES[args.theme])
        s = PromptInfo.get(abbreviate=args.abbreviate).display(paint)
    print(s)


if __name__ == "__main__":
    main()
