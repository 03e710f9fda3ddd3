"""scaffold_project(): turn a ScaffoldConfig into a populated project directory."""

import os

from newcli.scaffold.config import ScaffoldConfig, ScaffoldResult
from newcli.scaffold.errors import DirectoryNotEmptyError, ScaffoldError
from newcli.scaffold.filesystem import (
    copy_tree,
    destination_paths,
    is_directory_empty,
    list_files_recursively,
)
from newcli.scaffold.installer import DependencyInstaller
from newcli.scaffold.process_runner import ProcessRunner
from newcli.scaffold.staging import staging_directory
from newcli.scaffold.template_cloner import TemplateCloner
from newcli.scaffold.tokens import apply_template_tokens


def scaffold_project(config: ScaffoldConfig, runner=None) -> ScaffoldResult:
    """Clone the template into config.target_directory and personalise it.

    Steps: check the target is empty (unless forced), clone into a sibling
    staging directory, copy the tree over the target, substitute the name
    tokens, and optionally install dependencies. The staging directory is
    removed whether or not any step fails. A partially copied target is
    left as is.

    Args:
        config: What to scaffold and where.
        runner: Object with ``run(cmd, cwd=None, env=None)`` returning a
            ProcessResult. Defaults to a real ProcessRunner.

    Raises:
        ScaffoldError: On an empty project name, a non-empty target without
            force, or a failing git clone / install command.
        OSError: On filesystem failures.
    """
    target_dir = os.path.abspath(config.target_directory)
    project_name = config.project_name.strip()
    runner = runner or ProcessRunner()

    if not project_name:
        raise ScaffoldError("Project name must not be empty.")

    if not config.force_overwrite and not is_directory_empty(target_dir):
        raise DirectoryNotEmptyError(target_dir)

    os.makedirs(target_dir, exist_ok=True)

    with staging_directory(target_dir) as staging:
        TemplateCloner(runner).clone(config.template_source, staging)

        template_files = list_files_recursively(staging)
        created_files = destination_paths(template_files, staging, target_dir)

        copy_tree(staging, target_dir)
        apply_template_tokens(created_files, project_name)

        installed = False
        if config.run_install:
            DependencyInstaller(runner).install(target_dir)
            installed = True

        return ScaffoldResult(
            target_directory=target_dir,
            project_name=project_name,
            created_files=tuple(created_files),
            installed_dependencies=installed,
        )
