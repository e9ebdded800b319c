from __future__ import annotations

from typing import Sequence


class BootstrapError(RuntimeError):
    """Base class for bootstrap failures."""


class CommandError(BootstrapError):
    """An external command exited non-zero (or could not be started)."""

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed ({returncode}): {' '.join(self.argv)}"
        if stderr:
            msg = f"{msg}\n{stderr.strip()}"
        super().__init__(msg)


class ConfigError(BootstrapError, ValueError):
    """The manifest could not be loaded or is malformed."""
