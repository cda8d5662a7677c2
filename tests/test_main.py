"""Tests for the nextsetup entry point exit codes."""

from pathlib import Path
from unittest.mock import patch

import pytest

from nextsetup.__main__ import main, run
from nextsetup.constants import SETUP_FAILED, SETUP_SUCCESS
from nextsetup.state import SetupSession
from nextsetup.wizard import WizardResult


def _result(**kwargs) -> WizardResult:
    return WizardResult(session=SetupSession.start(Path.cwd()), **kwargs)


@pytest.fixture(autouse=True)
def _quiet_setup():
    with (
        patch("nextsetup.__main__.setup_logging"),
        patch("nextsetup.__main__.reset_terminal_for_input") as reset,
    ):
        yield reset


def test_success_exits_zero() -> None:
    with patch("nextsetup.__main__.run_wizard", return_value=_result(success=True)):
        assert main() == SETUP_SUCCESS


def test_fatal_failure_exits_one() -> None:
    failed = _result(success=False, failed_step="Next.js", error="Command failed with exit code 1")
    with patch("nextsetup.__main__.run_wizard", return_value=failed):
        assert main() == SETUP_FAILED


def test_cancel_exits_one(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("nextsetup.__main__.run_wizard", return_value=_result(success=False, cancelled=True)):
        assert main() == SETUP_FAILED
    assert "Setup cancelled." in capsys.readouterr().out


def test_keyboard_interrupt_exits_one_and_resets_terminal(_quiet_setup) -> None:
    with patch("nextsetup.__main__.run_wizard", side_effect=KeyboardInterrupt):
        assert main() == SETUP_FAILED
    _quiet_setup.assert_called_once()


def test_run_calls_sys_exit() -> None:
    with patch("nextsetup.__main__.main", return_value=SETUP_SUCCESS):
        with pytest.raises(SystemExit) as exc_info:
            run()
    assert exc_info.value.code == 0


def test_unexpected_error_exits_one_with_diagnostic(_quiet_setup) -> None:
    with (
        patch("nextsetup.__main__.run_wizard", side_effect=ValueError("boom")),
        patch("nextsetup.__main__.ui.error") as error,
    ):
        assert main() == SETUP_FAILED
    error.assert_called_once()
    assert "boom" in error.call_args.args[0]
    _quiet_setup.assert_called_once()
