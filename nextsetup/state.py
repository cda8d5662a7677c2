"""Run state of one wizard session."""

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True)
class SetupSession:
    """Decisions and paths collected during one run of the wizard.

    Immutable: each answer or step produces a new session via with_().
    project_path always names a directory that exists before a step runs in it.
    """

    project_path: Path
    base_path: Path
    project_name: str | None = None
    init_framework: bool = False
    init_component_library: bool = False
    init_formatter: bool = False
    install_formatter_plugins: bool = False
    init_container: bool = False

    @classmethod
    def start(cls, cwd: Path | None = None) -> "SetupSession":
        root = (cwd or Path.cwd()).resolve()
        return cls(project_path=root, base_path=root)

    @property
    def is_new_directory(self) -> bool:
        return self.project_name is not None

    def with_(self, **changes: object) -> "SetupSession":
        return replace(self, **changes)
