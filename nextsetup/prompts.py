"""Operator questions. Each returns the answer, or None if the prompt was cancelled."""

import re

import questionary

from nextsetup.constants import (
    LOCATION_CURRENT,
    LOCATION_NEW,
    PROJECT_NAME_ERROR,
    PROJECT_NAME_PATTERN,
)
from nextsetup.errors import ValidationError
from nextsetup.ui import STYLE

_NAME_RE = re.compile(PROJECT_NAME_PATTERN)


def check_project_name(name: str) -> str:
    """Return name unchanged if it is a valid project name, else raise ValidationError."""
    if not _NAME_RE.fullmatch(name):
        raise ValidationError(PROJECT_NAME_ERROR)
    return name


def validate_project_name(name: str) -> bool | str:
    """questionary validator: True when accepted, the error message otherwise."""
    try:
        check_project_name(name)
    except ValidationError as e:
        return str(e)
    return True


def ask_setup_location() -> str | None:
    return questionary.select(
        "Where do you want to setup your project? (Current/New)",
        choices=[LOCATION_CURRENT, LOCATION_NEW],
        style=STYLE,
    ).ask()


def ask_project_name(default: str = "my-nextjs-app") -> str | None:
    """Ask for the new directory name. questionary re-prompts until it validates."""
    return questionary.text(
        "Enter your project name:",
        default=default,
        validate=validate_project_name,
        style=STYLE,
    ).ask()


def _confirm(message: str, default: bool) -> bool | None:
    return questionary.confirm(message, default=default, style=STYLE).ask()


def ask_initialize_nextjs() -> bool | None:
    return _confirm("Start initializing the Next.js project?", default=True)


def ask_initialize_shadcn() -> bool | None:
    return _confirm("Initialize shadcn/ui?", default=True)


def ask_initialize_prettier() -> bool | None:
    return _confirm("Setup Prettier for code formatting?", default=True)


def ask_install_prettier_plugins() -> bool | None:
    return _confirm(
        "Install plugins for sorting imports and prettifying Tailwind classes?",
        default=True,
    )


def ask_initialize_docker() -> bool | None:
    return _confirm("Initialize docker for your project?", default=False)
