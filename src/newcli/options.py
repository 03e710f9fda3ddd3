"""Option resolution for the new command: raw CLI values -> ScaffoldConfig."""

import os
from dataclasses import dataclass
from typing import Tuple

import click

from newcli.scaffold.config import DEFAULT_TEMPLATE_REPO, ScaffoldConfig
from newcli.scaffold.errors import DirectoryNotEmptyError
from newcli.scaffold.filesystem import is_directory_empty


@dataclass
class CliOptions:
    """Values as click parsed them, before validation.

    project_names and paths are collected as tuples so that repeated values
    can be reported instead of silently keeping the last one.
    """

    project_names: Tuple[str, ...] = ()
    paths: Tuple[str, ...] = ()
    force: bool = False
    install: bool = True
    template_source: str = DEFAULT_TEMPLATE_REPO

    @property
    def project_name_arg(self):
        return self.project_names[0] if self.project_names else None

    @property
    def path_arg(self):
        return _strip_short_equals(self.paths[0]) if self.paths else None

    def validate(self):
        """Raise click.UsageError if the combination of values is invalid."""
        for index, raw in enumerate(self.paths):
            value = _strip_short_equals(raw)
            if value.startswith("-"):
                raise click.UsageError("Missing value for --path.")
            if not value.strip():
                raise click.UsageError("Path must not be empty.")
            if index > 0:
                raise click.UsageError("Path can only be provided once.")

        if len(self.project_names) > 1:
            raise click.UsageError("Only one project name can be provided.")

        if self.project_names and self.paths:
            raise click.UsageError("Use either a project name argument or --path, not both.")


def _strip_short_equals(value):
    # click hands "-p=dir" over as "=dir"
    return value[1:] if value.startswith("=") else value


def resolve_config(opts: CliOptions, prompter, cwd=None) -> ScaffoldConfig:
    """Work out the target directory and project name, prompting if needed.

    With neither a name nor --path, the current directory is the target;
    if it is not empty the user is asked for a project name instead. If the
    target turns out to be non-empty and --force was not given, the user is
    asked whether to overwrite.

    Args:
        opts: Validated CliOptions.
        prompter: Object with ``interactive``, ``ask_project_name()`` and
            ``confirm_overwrite(target_dir)``.
        cwd: Directory relative paths resolve against. Defaults to os.getcwd().

    Raises:
        click.ClickException: If no usable project name can be determined
            or the user declines to overwrite.
        DirectoryNotEmptyError: If the target is non-empty, --force was not
            given and there is no terminal to ask.
        click.Abort: If the user cancels a prompt.
    """
    cwd = os.path.abspath(cwd or os.getcwd())
    target_dir = cwd

    if opts.path_arg is not None:
        target_dir = _resolve_against(cwd, opts.path_arg)
    elif opts.project_name_arg is not None:
        target_dir = _resolve_against(cwd, opts.project_name_arg)
    elif not is_directory_empty(cwd):
        if not prompter.interactive:
            raise click.ClickException(
                "Current directory is not empty. "
                "Use `new <project-name>` or `new --path <path>`."
            )
        target_dir = _resolve_against(cwd, prompter.ask_project_name().strip())

    project_name = os.path.basename(target_dir)
    if not project_name.strip():
        raise click.ClickException("Project name is required.")

    force = opts.force
    if not force and not is_directory_empty(target_dir):
        if not prompter.interactive:
            raise DirectoryNotEmptyError(target_dir)
        if not prompter.confirm_overwrite(target_dir):
            raise click.ClickException("Aborted because target directory is not empty.")
        force = True

    return ScaffoldConfig(
        target_directory=target_dir,
        project_name=project_name,
        force_overwrite=force,
        run_install=opts.install,
        template_source=opts.template_source,
    )


def _resolve_against(cwd, path):
    return os.path.abspath(os.path.join(cwd, os.path.expanduser(path)))
