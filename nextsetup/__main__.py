"""Entry point for the setup wizard. Exit codes: see nextsetup.constants."""

import logging
import sys

from nextsetup import ui
from nextsetup.constants import SETUP_FAILED, SETUP_SUCCESS
from nextsetup.logging_config import setup_logging
from nextsetup.settings import merge_settings
from nextsetup.terminal import reset_terminal_for_input
from nextsetup.wizard import run_wizard

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the wizard. Returns the process exit code."""
    settings = merge_settings()
    setup_logging(settings)

    try:
        result = run_wizard(settings=settings)

        if result.success:
            return SETUP_SUCCESS

        if result.cancelled:
            print("\nSetup cancelled.")
        return SETUP_FAILED

    except KeyboardInterrupt:
        print("\n\nSetup cancelled.")
        return SETUP_FAILED

    except Exception as e:
        logger.exception("Setup aborted by an unexpected error")
        ui.error(f"\nAn error occurred: {e}\n")
        return SETUP_FAILED

    finally:
        reset_terminal_for_input()


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
