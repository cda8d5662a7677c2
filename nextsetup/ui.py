"""Shared UI styling and colored output for the setup wizard."""

import questionary
from questionary import Style

STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
    ]
)

BANNER = """
  +-----------------------------+
  |      Next.js  Setup  CLI    |
  +-----------------------------+
"""


def info(text: str) -> None:
    questionary.print(text, style="fg:ansicyan")


def success(text: str, bold: bool = False) -> None:
    questionary.print(text, style="fg:ansigreen bold" if bold else "fg:ansigreen")


def warn(text: str) -> None:
    questionary.print(text, style="fg:ansiyellow")


def error(text: str) -> None:
    questionary.print(text, style="fg:ansired bold")


def dim(text: str) -> None:
    questionary.print(text, style="fg:ansibrightblack")


def plain(text: str) -> None:
    questionary.print(text, style="fg:ansiwhite")


def banner() -> None:
    """Print the welcome banner."""
    questionary.print("Welcome to Next.js Project Setup CLI!", style="fg:ansimagenta bold")
    questionary.print(BANNER, style="fg:ansicyan bold")
