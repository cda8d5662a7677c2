"""Error taxonomy for setup steps.

Steps raise these; the wizard decides whether a failure ends the session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from nextsetup.command import Command


class SetupError(Exception):
    """Base class for every failure a setup step can report."""


class ValidationError(SetupError):
    """Operator input rejected locally. Recovered by asking again."""


class DirectoryConflict(SetupError):
    """The directory to create already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Directory "{path.name}" already exists!')


class ExternalToolFailure(SetupError):
    """An external command exited non-zero or could not be launched."""

    def __init__(
        self,
        command: Command,
        *,
        exit_code: int | None = None,
        spawn_failed: bool = False,
        reason: str = "",
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        self.spawn_failed = spawn_failed
        if spawn_failed:
            message = f"Could not start {command.executable!r}"
            if reason:
                message += f": {reason}"
        else:
            message = f"Command failed with exit code {exit_code}"
        super().__init__(message)


class FilesystemError(SetupError):
    """Unexpected I/O failure while reading or writing a project file."""

    def __init__(self, path: Path, action: str, cause: OSError | ValueError) -> None:
        self.path = path
        self.action = action
        detail = getattr(cause, "strerror", None) or cause
        super().__init__(f"Failed to {action} {path}: {detail}")
