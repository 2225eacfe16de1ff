from __future__ import annotations
import os
from pathlib import Path
from .exceptions import MissingEnvError


def cat(path: Path) -> str | None:
    """
    Return the contents of the given file with leading & trailing whitespace
    stripped.  If the file does not exist, return `None`.
    """
    try:
        return path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None


def getenv(name: str) -> str:
    """
    Return the value of the environment variable ``name``, raising
    `MissingEnvError` if it is not set
    """
    try:
        return os.environ[name]
    except KeyError:
        raise MissingEnvError(name) from None
