"""Step descriptor shared by the wizard and the step modules."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from nextsetup.state import SetupSession


class Severity(Enum):
    """What a step failure means for the session."""

    FATAL = "fatal"  # Report and end the session with SETUP_FAILED
    BEST_EFFORT = "best_effort"  # Report and continue


StepRunner = Callable[[SetupSession, dict[str, Any]], SetupSession]


@dataclass(frozen=True)
class Step:
    name: str
    severity: Severity
    run: StepRunner
