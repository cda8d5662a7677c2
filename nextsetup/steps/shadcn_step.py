"""Initialize shadcn/ui with its defaults."""

from pathlib import Path
from typing import Any

from nextsetup import ui
from nextsetup.command import run_command
from nextsetup.settings import get_setting, merge_settings
from nextsetup.state import SetupSession
from nextsetup.steps.base import Severity, Step


def init(path: Path, settings: dict[str, Any] | None = None) -> None:
    """Run `shadcn init` non-interactively (-d defaults, -y yes) inside path."""
    settings = settings or merge_settings()
    ui.info("\nInitializing shadcn/ui...\n")
    run_command(
        get_setting(settings, "tools.npx", "npx"),
        [get_setting(settings, "shadcn.package", "shadcn@latest"), "init", "-d", "-y"],
        path,
    )
    ui.success("\nshadcn/ui initialized successfully!\n")


def run_shadcn_step(session: SetupSession, settings: dict[str, Any]) -> SetupSession:
    init(session.project_path, settings)
    return session


STEP = Step(name="shadcn/ui", severity=Severity.FATAL, run=run_shadcn_step)
