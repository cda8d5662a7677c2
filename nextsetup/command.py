"""Run external generator tools with the operator's terminal attached."""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from nextsetup import ui
from nextsetup.errors import ExternalToolFailure
from nextsetup.terminal import preserved_tty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """One external invocation: executable, arguments, working directory."""

    executable: str
    args: tuple[str, ...]
    cwd: Path

    def display(self) -> str:
        return " ".join([self.executable, *self.args])

    def argv(self) -> list[str]:
        """Full argv with the executable resolved on PATH (npx.cmd on Windows)."""
        resolved = shutil.which(self.executable) or self.executable
        return [resolved, *self.args]


@dataclass(frozen=True)
class CommandResult:
    command: Command
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0


def run_command(executable: str, args: Sequence[str], cwd: Path | str) -> CommandResult:
    """Run a command and block until it exits.

    Output is not captured: stdin, stdout and stderr are inherited so
    interactive tools can talk to the operator directly.
    Raises ExternalToolFailure on non-zero exit or when the executable cannot start.
    """
    command = Command(executable=executable, args=tuple(args), cwd=Path(cwd))
    ui.dim(f"Running: {command.display()}\n")
    logger.info("Running %s in %s", command.display(), command.cwd)

    try:
        with preserved_tty():
            completed = subprocess.run(command.argv(), cwd=str(command.cwd), check=False)
    except OSError as e:
        logger.error("Could not start %s: %s", command.executable, e)
        raise ExternalToolFailure(command, spawn_failed=True, reason=str(e)) from e

    if completed.returncode != 0:
        logger.error("%s exited with code %d", command.display(), completed.returncode)
        raise ExternalToolFailure(command, exit_code=completed.returncode)

    logger.info("%s finished", command.display())
    return CommandResult(command=command, exit_code=0)
