"""Create the new project directory."""

from typing import Any

from nextsetup import ui
from nextsetup.files import create_project_directory
from nextsetup.state import SetupSession
from nextsetup.steps.base import Severity, Step


def run_directory_step(session: SetupSession, settings: dict[str, Any]) -> SetupSession:
    """Create base_path/project_name and point the session at it."""
    if session.project_name is None:
        raise ValueError("directory step needs a project name")
    ui.info("\nCreating project directory...")
    path = create_project_directory(session.project_name, session.base_path)
    ui.success(f"Directory created: {session.project_name}")
    return session.with_(project_path=path)


STEP = Step(name="project directory", severity=Severity.FATAL, run=run_directory_step)
