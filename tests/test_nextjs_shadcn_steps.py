"""Tests for the create-next-app and shadcn/ui steps."""

from pathlib import Path
from unittest.mock import patch

from nextsetup.settings import merge_settings
from nextsetup.state import SetupSession
from nextsetup.steps import nextjs_step, shadcn_step
from nextsetup.steps.base import Severity


def test_init_new_passes_name_and_base_path(tmp_path: Path) -> None:
    with patch("nextsetup.steps.nextjs_step.run_command") as run:
        nextjs_step.init_new("site", tmp_path)

    run.assert_called_once_with(
        "npx",
        [
            "create-next-app@latest",
            "site",
            "--typescript",
            "--tailwind",
            "--app",
            "--src-dir",
            "--import-alias",
            "@/*",
            "--no-git",
            "--use-npm",
        ],
        tmp_path,
    )


def test_init_current_targets_dot_with_eslint(tmp_path: Path) -> None:
    with patch("nextsetup.steps.nextjs_step.run_command") as run:
        nextjs_step.init_current(tmp_path)

    executable, args, cwd = run.call_args.args
    assert executable == "npx"
    assert args[:2] == ["create-next-app@latest", "."]
    assert "--eslint" in args
    assert cwd == tmp_path


def test_new_variant_has_no_eslint_flag() -> None:
    assert "--eslint" not in nextjs_step.scaffold_args("site", merge_settings())


def test_scaffold_args_follow_settings() -> None:
    settings = merge_settings({"nextjs": {"package": "create-next-app@15", "import_alias": "~/*"}})
    args = nextjs_step.scaffold_args(".", settings)
    assert args[0] == "create-next-app@15"
    assert args[args.index("--import-alias") + 1] == "~/*"


def test_run_nextjs_step_moves_session_into_new_project(tmp_path: Path) -> None:
    session = SetupSession.start(tmp_path).with_(project_name="site")
    with patch("nextsetup.steps.nextjs_step.run_command"):
        updated = nextjs_step.run_nextjs_step(session, merge_settings())
    assert updated.project_path == tmp_path.resolve() / "site"
    assert session.project_path == tmp_path.resolve()


def test_run_nextjs_step_current_keeps_path(tmp_path: Path) -> None:
    session = SetupSession.start(tmp_path)
    with patch("nextsetup.steps.nextjs_step.run_command") as run:
        updated = nextjs_step.run_nextjs_step(session, merge_settings())
    assert updated == session
    assert run.call_args.args[2] == tmp_path.resolve()


def test_shadcn_init_runs_non_interactive(tmp_path: Path) -> None:
    with patch("nextsetup.steps.shadcn_step.run_command") as run:
        shadcn_step.init(tmp_path)
    run.assert_called_once_with("npx", ["shadcn@latest", "init", "-d", "-y"], tmp_path)


def test_fatal_steps() -> None:
    assert nextjs_step.STEP.severity is Severity.FATAL
    assert shadcn_step.STEP.severity is Severity.FATAL
