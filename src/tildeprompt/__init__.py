"""
A fast, compact shell prompt

``tildeprompt`` prints a shell prompt showing the hostname, the username, an
abbreviated path to the current directory, any Git operations (rebases,
merges, cherry-picks, reverts, bisections) in progress, and a prompt symbol
colored by whether the current directory is writable.

Features:

- Abbreviates every directory in the path except the last to its first
  character, with paths under ``$HOME`` shown relative to ``~``
- Highlights the hostname when logged in over SSH
- Flags concurrent Git operations more loudly than a single one
- Can also output a window title or a right-hand prompt showing the current
  Git ``HEAD`` and its commit subject
- Supports raw terminal output as well as Bash and zsh prompt escapes
"""

__version__ = "0.1.0"
__license__ = "MIT"
