from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
import socket
from .exceptions import MissingEnvError
from .git import RepoState, git_state
from .path import (
    ABBREVIATE_INTERMEDIATE_COMPONENTS,
    PathSegment,
    format_path,
    plain_path,
    render_path,
)
from .styles import Painter
from .styles import StyleClass as SC
from .util import cat, getenv

log = logging.getLogger(__name__)

#: Text shown in place of any value that could not be determined
PLACEHOLDER = "?"

#: File containing the local hostname
HOSTNAME_FILE = Path("/etc/hostname")


@dataclass
class PromptInfo:
    hostname: str

    username: str

    #: `True` iff we're in an SSH session (:envvar:`SSH_CONNECTION` is set)
    ssh: bool

    #: The formatted path to the current working directory, or `None` if the
    #: current directory could not be determined (e.g., it's been deleted)
    path: list[PathSegment] | None

    repo_state: RepoState = field(default_factory=RepoState)

    superuser: bool = False

    #: Whether the current user can write to the current directory, or `None`
    #: if this could not be determined
    writable: bool | None = None

    @classmethod
    def get(cls, abbreviate: bool = ABBREVIATE_INTERMEDIATE_COMPONENTS) -> PromptInfo:
        """
        Gather information about the current environment.  Any piece of
        information that cannot be determined is replaced by a placeholder.
        """
        try:
            host = hostname()
        except (OSError, UnicodeDecodeError) as e:
            log.debug("Could not determine hostname: %s", e)
            host = PLACEHOLDER

        try:
            user = getenv("USER")
        except MissingEnvError as e:
            log.debug("Could not determine username: %s", e)
            user = PLACEHOLDER

        superuser = os.geteuid() == 0

        path: list[PathSegment] | None
        writable: bool | None
        try:
            cwd = current_dir()
        except OSError as e:
            log.debug("Could not determine current directory: %s", e)
            path = None
            writable = None
        else:
            path = format_path(cwd, home_dir(), abbreviate=abbreviate)
            writable = superuser or can_write(cwd)

        return cls(
            hostname=host,
            username=user,
            ssh="SSH_CONNECTION" in os.environ,
            path=path,
            repo_state=git_state(),
            superuser=superuser,
            writable=writable,
        )

    def display(self, paint: Painter) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """

        # Show the current hostname, highlighted if it's a remote machine:
        ps1 = paint(self.hostname, SC.HOST_SSH if self.ssh else SC.HOST)
        ps1 += " " + paint(self.username, SC.USER) + ":"

        # Show the path to the current working directory:
        if self.path is not None:
            ps1 += render_path(self.path, paint)
        else:
            ps1 += paint(PLACEHOLDER, SC.PATH_ROOT)
        ps1 += " "

        # Show any Git operations in progress:
        if state := self.repo_state.display(paint):
            ps1 += state + " "

        # The actual prompt symbol at the end of the prompt, colored by
        # whether the current directory is writable:
        if self.writable is None:
            klass = SC.PROMPT_UNKNOWN
        elif self.writable:
            klass = SC.PROMPT_WRITABLE
        else:
            klass = SC.PROMPT_READONLY
        ps1 += paint("#" if self.superuser else "$", klass) + " "

        return ps1


def title(abbreviate: bool = ABBREVIATE_INTERMEDIATE_COMPONENTS) -> str:
    """
    Return a string suitable for use as the terminal window's title:
    :envvar:`TAB` if set, else the hostname if we're in an SSH session, else
    the (unstyled) path to the current directory
    """
    if (tab := os.environ.get("TAB")) is not None:
        return tab
    if "SSH_CONNECTION" in os.environ:
        try:
            host = hostname()
        except (OSError, UnicodeDecodeError) as e:
            log.debug("Could not determine hostname: %s", e)
            host = PLACEHOLDER
        return f"SSH {host}"
    try:
        cwd = current_dir()
    except OSError as e:
        log.debug("Could not determine current directory: %s", e)
        return PLACEHOLDER
    return plain_path(format_path(cwd, home_dir(), abbreviate=abbreviate))


def hostname() -> str:
    """
    Return the local hostname as given in :file:`/etc/hostname`, falling back
    to the system's idea of the hostname if that file does not exist.  Raises
    `UnicodeDecodeError` if the file is not UTF-8.
    """
    return cat(HOSTNAME_FILE) or socket.gethostname() or PLACEHOLDER


def home_dir() -> Path | None:
    """
    Return the current user's home directory, or `None` if it cannot be
    determined
    """
    if os.environ.get("HOME") == "":
        log.debug("$HOME is empty; treating as unset")
        return None
    try:
        home = Path.home()
    except RuntimeError as e:
        log.debug("Could not determine home directory: %s", e)
        return None
    return home if home.is_absolute() else None


def current_dir() -> Path:
    """
    Return the path to the current working directory.  Raises `OSError` if
    the directory no longer exists.
    """
    cwd = os.getcwd()
    # Prefer $PWD to os.getcwd() as the former does not resolve symlinks, but
    # only if it's up to date
    pwd = os.environ.get("PWD")
    if pwd and os.path.isabs(pwd):
        try:
            if os.path.samefile(pwd, cwd):
                return Path(pwd)
        except OSError as e:
            log.debug("Ignoring stale $PWD: %s", e)
    return Path(cwd)


def can_write(path: Path) -> bool:
    return os.access(path, os.W_OK)
