from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import logging
import os
from pathlib import Path
import subprocess
from .exceptions import GitCommandError
from .styles import Painter
from .styles import StyleClass as SC

log = logging.getLogger(__name__)


class RepoOp(Enum):
    """
    Represents the various "in progress" operations that a Git repository can
    be in the middle of.  The value of each enumeration is the tag displayed
    for it in the prompt, and the enumerations are declared in the order in
    which their tags are displayed.
    """

    REBASE_INTERACTIVE = "REBASE-i"
    REBASE_MERGE = "REBASE-m"
    REBASE = "REBASE"
    AM = "AM"
    #: ``rebase-apply/`` exists but says neither whether it's a rebase nor an
    #: ``am``
    REBASE_OR_AM = "REBASE/AM"
    MERGE = "MERGE"
    CHERRY_PICK = "CHERRY-PICK"
    REVERT = "REVERT"
    BISECT = "BISECT"


@dataclass(frozen=True)
class RepoState:
    #: The operations currently in progress, in display order
    ops: tuple[RepoOp, ...] = ()

    @property
    def tags(self) -> list[str]:
        return [op.value for op in self.ops]

    def display(self, paint: Painter) -> str:
        if not self.ops:
            return ""
        s = " ".join(self.tags)
        if len(self.ops) == 1:
            return paint(s, SC.GIT_STATE)
        else:
            # More than one operation at once deserves extra attention:
            return paint(s, SC.GIT_STATE_MULTI)


def detect_repo_state(
    git_dir: Path, exists: Callable[[Path], bool] = os.path.exists
) -> RepoState:
    """
    Determine which operations are in progress in the repository whose
    control directory is ``git_dir`` by checking for the marker files that
    Git leaves there.  ``exists`` is used for all filesystem checks.

    This function is based on the ``__git_ps1`` function in Git's
    `git-prompt.sh`__.

    __ https://github.com/git/git/blob/master/contrib/completion/git-prompt.sh
    """
    rebase_merge = exists(git_dir / "rebase-merge")
    rebase_interactive = rebase_merge and exists(
        git_dir / "rebase-merge" / "interactive"
    )
    rebase_apply = exists(git_dir / "rebase-apply")
    rebase = rebase_apply and exists(git_dir / "rebase-apply" / "rebasing")
    am = rebase_apply and exists(git_dir / "rebase-apply" / "applying")
    merge = exists(git_dir / "MERGE_HEAD")
    cherry_pick = exists(git_dir / "CHERRY_PICK_HEAD")
    revert = exists(git_dir / "REVERT_HEAD")
    bisect = exists(git_dir / "BISECT_LOG")

    ops: list[RepoOp] = []
    if rebase_interactive:
        ops.append(RepoOp.REBASE_INTERACTIVE)
    elif rebase_merge:
        ops.append(RepoOp.REBASE_MERGE)
    if rebase:
        ops.append(RepoOp.REBASE)
    if am:
        ops.append(RepoOp.AM)
    if rebase_apply and not (rebase or am):
        ops.append(RepoOp.REBASE_OR_AM)
    if merge:
        ops.append(RepoOp.MERGE)
    if cherry_pick:
        ops.append(RepoOp.CHERRY_PICK)
    if revert:
        ops.append(RepoOp.REVERT)
    if bisect:
        ops.append(RepoOp.BISECT)
    return RepoState(tuple(ops))


def git_dir() -> Path | None:
    """
    Return the path to the control directory of the Git repository containing
    the current directory, or `None` if there is no such repository (or Git
    is not installed)
    """
    try:
        return Path(git("rev-parse", "--git-dir"))
    except GitCommandError as e:
        log.debug("Not in a Git repository: %s", e)
        return None


def git_state() -> RepoState:
    """
    Return the operations in progress in the current Git repository.  If the
    current directory is not in a Git repository, the state is empty.
    """
    if (gd := git_dir()) is None:
        return RepoState()
    return detect_repo_state(gd)


def git_head() -> str:
    """
    Return a string of the form ``(<HEAD ref>) "<last commit subject>"``
    describing the current Git repository's ``HEAD``, or the empty string if
    this cannot be determined
    """
    try:
        ref = git("rev-parse", "--abbrev-ref", "HEAD")
        subject = git("log", "-1", "--format=%s")
    except GitCommandError as e:
        log.debug("Could not describe HEAD: %s", e)
        return ""
    return f'({ref}) "{subject}"'


def git(*args: str) -> str:
    """
    Run a Git command (suppressing stderr) and return its stdout with leading &
    trailing whitespace stripped.  If Git cannot be executed, the command
    fails, or the output is not UTF-8, a `GitCommandError` is raised.
    """
    cmd = ["git", *args]
    try:
        r = subprocess.run(
            cmd,
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise GitCommandError(cmd) from e
    except subprocess.CalledProcessError as e:
        raise GitCommandError(cmd, e.returncode) from e
    try:
        return r.stdout.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise GitCommandError(cmd, r.returncode) from e
