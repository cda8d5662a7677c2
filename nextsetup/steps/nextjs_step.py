"""Scaffold the Next.js application with create-next-app."""

from pathlib import Path
from typing import Any

from nextsetup import ui
from nextsetup.command import run_command
from nextsetup.settings import get_setting, merge_settings
from nextsetup.state import SetupSession
from nextsetup.steps.base import Severity, Step


def scaffold_args(target: str, settings: dict[str, Any], *, eslint: bool = False) -> list[str]:
    """create-next-app arguments: TypeScript, Tailwind, app router, src/, alias, no git, npm."""
    args = [
        get_setting(settings, "nextjs.package", "create-next-app@latest"),
        target,
        "--typescript",
        "--tailwind",
    ]
    if eslint:
        args.append("--eslint")
    args += [
        "--app",
        "--src-dir",
        "--import-alias",
        get_setting(settings, "nextjs.import_alias", "@/*"),
        "--no-git",
        "--use-npm",
    ]
    return args


def init_new(name: str, base_path: Path, settings: dict[str, Any] | None = None) -> None:
    """Run the scaffolder from base_path, letting it populate base_path/name."""
    settings = settings or merge_settings()
    ui.info("\nInitializing Next.js project...\n")
    ui.warn("This may take a few minutes. Please wait...\n")
    run_command(get_setting(settings, "tools.npx", "npx"), scaffold_args(name, settings), base_path)
    ui.success("\nNext.js project initialized successfully!\n")


def init_current(path: Path, settings: dict[str, Any] | None = None) -> None:
    """Run the scaffolder inside path, targeting "."."""
    settings = settings or merge_settings()
    ui.info("\nInitializing Next.js project in current directory...\n")
    ui.warn("This may take a few minutes. Please wait...\n")
    run_command(
        get_setting(settings, "tools.npx", "npx"),
        scaffold_args(".", settings, eslint=True),
        path,
    )
    ui.success("\nNext.js project initialized successfully!\n")


def run_nextjs_step(session: SetupSession, settings: dict[str, Any]) -> SetupSession:
    if session.project_name is not None:
        init_new(session.project_name, session.base_path, settings)
        return session.with_(project_path=session.base_path / session.project_name)
    init_current(session.project_path, settings)
    return session


STEP = Step(name="Next.js", severity=Severity.FATAL, run=run_nextjs_step)
