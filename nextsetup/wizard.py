"""Setup wizard orchestration.

The wizard asks one question before each optional step and runs the steps in
a fixed order. Steps raise SetupError; this module is the only place that
turns a failure into a result, according to the step's severity.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from nextsetup import prompts, steps, ui
from nextsetup.constants import LOCATION_NEW
from nextsetup.errors import SetupError
from nextsetup.settings import get_setting, merge_settings
from nextsetup.state import SetupSession
from nextsetup.steps import Severity, Step

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class WizardResult:
    """Outcome of one wizard run."""

    success: bool
    session: SetupSession
    cancelled: bool = False  # Operator aborted a prompt (Ctrl+C)
    failed_step: str | None = None
    error: str | None = None


class _PromptCancelled(Exception):
    pass


class _StepAborted(Exception):
    def __init__(self, step: Step, error: Exception, session: SetupSession) -> None:
        super().__init__(str(error))
        self.step = step
        self.error = error
        self.session = session


def _answer(value: T | None) -> T:
    """Unwrap a questionary answer; None means the prompt was cancelled."""
    if value is None:
        raise _PromptCancelled()
    return value


def execute_step(step: Step, session: SetupSession, settings: dict[str, Any]) -> SetupSession:
    """Run one step and apply its failure severity.

    FATAL failures propagate as _StepAborted. BEST_EFFORT failures are
    reported and the unchanged session is returned.
    """
    try:
        return step.run(session, settings)
    except (SetupError, OSError) as e:
        if step.severity is Severity.BEST_EFFORT:
            logger.warning("%s step failed, continuing: %s", step.name, e)
            ui.error(f"\nFailed to setup {step.name}: {e}\n")
            return session
        logger.error("%s step failed: %s", step.name, e)
        ui.error(f"\nFailed to initialize {step.name}: {e}\n")
        raise _StepAborted(step, e, session) from e


def run_wizard(
    cwd: Path | None = None,
    settings: dict[str, Any] | None = None,
) -> WizardResult:
    """Run the full setup wizard.

    Returns WizardResult(success=True) when every accepted step finished, or the
    operator stopped early by declining Next.js or shadcn/ui.
    Returns success=False with failed_step set when a fatal step failed, and
    success=False, cancelled=True when a prompt was aborted.
    """
    settings = merge_settings(settings)
    session = SetupSession.start(cwd)
    try:
        return _run(session, settings)
    except _PromptCancelled:
        return WizardResult(success=False, session=session, cancelled=True)
    except _StepAborted as e:
        return WizardResult(
            success=False,
            session=e.session,
            failed_step=e.step.name,
            error=str(e.error),
        )


def _run(session: SetupSession, settings: dict[str, Any]) -> WizardResult:
    ui.banner()

    location = _answer(prompts.ask_setup_location())
    if location == LOCATION_NEW:
        name = _answer(
            prompts.ask_project_name(get_setting(settings, "project.default_name", "my-nextjs-app"))
        )
        session = execute_step(steps.DIRECTORY, session.with_(project_name=name), settings)
    else:
        ui.warn("\nUsing current directory")

    if not _answer(prompts.ask_initialize_nextjs()):
        ui.warn("\nSetup cancelled. Goodbye!")
        return WizardResult(success=True, session=session)
    session = execute_step(steps.NEXTJS, session.with_(init_framework=True), settings)

    if not _answer(prompts.ask_initialize_shadcn()):
        ui.success("\nSetup completed!")
        ui.info(f"\nProject location: {session.project_path}")
        ui.info("\nYour Next.js project is ready to go!")
        return WizardResult(success=True, session=session)
    session = execute_step(steps.SHADCN, session.with_(init_component_library=True), settings)

    if _answer(prompts.ask_initialize_prettier()):
        plugins = _answer(prompts.ask_install_prettier_plugins())
        session = execute_step(
            steps.PRETTIER,
            session.with_(init_formatter=True, install_formatter_plugins=plugins),
            settings,
        )

    if _answer(prompts.ask_initialize_docker()):
        session = execute_step(steps.DOCKER, session.with_(init_container=True), settings)

    print_summary(session, settings)
    return WizardResult(success=True, session=session)


def print_summary(session: SetupSession, settings: dict[str, Any]) -> None:
    ui.success("\nSetup completed successfully!", bold=True)
    ui.info(f"\nProject location: {session.project_path}")
    features = "shadcn/ui"
    if session.init_formatter:
        features += " and Prettier"
    if session.init_container:
        features += ", with Docker"
    ui.info(f"\nYour Next.js project with {features} is ready!")
    ui.warn("\nNext steps:")
    step_no = 1
    if session.is_new_directory:
        ui.plain(f"  {step_no}. cd {session.project_name}")
        step_no += 1
    ui.plain(f"  {step_no}. npm run dev")
    ui.plain(f"  {step_no + 1}. Open {get_setting(settings, 'project.dev_url', 'http://localhost:3000')}\n")
    if session.init_formatter:
        ui.dim("\nFormat your code with: npm run format")
