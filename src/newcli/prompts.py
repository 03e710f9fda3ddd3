"""Interactive prompts used while resolving options.

The scaffold orchestrator never prompts; only the option resolver asks
questions, through a Prompter passed in by the CLI so tests can swap in a
fake.
"""

import sys
from dataclasses import dataclass, field
from typing import TextIO

import click

PROJECT_NAME_PLACEHOLDER = "my-bun-app"


def _require_project_name(value):
    if not value or not value.strip():
        raise click.UsageError("Project name is required.")
    return value


@dataclass
class Prompter:
    """Asks the user for a project name and for overwrite confirmation.

    Cancelling a prompt (Ctrl+C or closed input) raises click.Abort.
    """

    stdin: TextIO = field(default_factory=lambda: sys.stdin)

    @property
    def interactive(self):
        """True when attached to a terminal that can answer prompts."""
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())

    def ask_project_name(self):
        return click.prompt(
            f"Project name (e.g. {PROJECT_NAME_PLACEHOLDER})",
            value_proc=_require_project_name,
        )

    def confirm_overwrite(self, target_dir):
        return click.confirm(
            f"Target directory is not empty: {target_dir}. Overwrite scaffold files?",
            default=False,
        )
