"""Exceptions raised by the prompt's environment collaborators"""

from __future__ import annotations


class PromptError(Exception):
    """Base class for errors raised while gathering prompt information"""


class MissingEnvError(PromptError):
    """Raised when a required environment variable is not set"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Environment variable not set: {name}")
        self.name = name


class GitCommandError(PromptError):
    """
    Raised when a Git invocation fails: Git is not installed, the command
    exits nonzero, or its output is not valid UTF-8
    """

    def __init__(self, command: list[str], returncode: int | None = None) -> None:
        message = f"Git command failed: {' '.join(command)}"
        if returncode is not None:
            message += f" (exit status {returncode})"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
