"""ScaffoldConfig and ScaffoldResult: the input and output of scaffold_project()."""

from dataclasses import dataclass
from typing import Tuple

DEFAULT_TEMPLATE_REPO = "https://github.com/rayhanadev/fresh"


@dataclass(frozen=True)
class ScaffoldConfig:
    """Everything scaffold_project() needs for one run."""

    target_directory: str
    project_name: str
    force_overwrite: bool = False
    run_install: bool = True
    template_source: str = DEFAULT_TEMPLATE_REPO


@dataclass(frozen=True)
class ScaffoldResult:
    """Outcome of a successful scaffold."""

    target_directory: str
    project_name: str
    created_files: Tuple[str, ...]
    installed_dependencies: bool
