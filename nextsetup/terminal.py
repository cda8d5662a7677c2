"""Terminal state around interactive child tools and questionary prompts.

create-next-app and shadcn run their own prompts on the inherited terminal.
If one of them exits (or is killed) while the tty is in raw or no-echo mode,
the next questionary prompt reads garbage. The wizard snapshots the tty
settings before each child and puts them back afterwards.
"""

import contextlib
import logging
import subprocess
import sys
from typing import Any, Iterator

logger = logging.getLogger(__name__)


def _interactive() -> bool:
    return sys.platform != "win32" and sys.stdin.isatty()


def save_tty() -> list[Any] | None:
    """Return stdin's termios attributes, or None when there is no Unix tty."""
    if not _interactive():
        return None
    import termios

    try:
        return termios.tcgetattr(sys.stdin.fileno())
    except termios.error as e:
        logger.debug("Could not read tty attributes: %s", e)
        return None


def restore_tty(attrs: list[Any] | None) -> None:
    """Put back attributes from save_tty(). None is a no-op."""
    if attrs is None:
        return
    import termios

    try:
        termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, attrs)
    except termios.error as e:
        logger.debug("Could not restore tty attributes: %s", e)


@contextlib.contextmanager
def preserved_tty() -> Iterator[None]:
    """Restore the tty settings on exit from the block, whatever the child did to them."""
    attrs = save_tty()
    try:
        yield
    finally:
        restore_tty(attrs)


def reset_terminal_for_input() -> None:
    """Force line + echo mode with `stty sane` before the wizard exits.

    Covers the case where the wizard itself is interrupted mid-prompt and no
    snapshot is left to restore.
    """
    if not _interactive():
        return
    try:
        subprocess.run(["stty", "sane"], stdin=sys.stdin, capture_output=True, timeout=2)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("stty sane failed: %s", e)
