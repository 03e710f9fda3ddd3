"""DependencyInstaller: runs the package manager in the scaffolded project."""

from newcli.scaffold.errors import CommandFailedError
from newcli.scaffold.process_runner import ProcessRunner

INSTALL_COMMAND = ["bun", "install"]


class DependencyInstaller:
    """Installs dependencies with ``bun install``."""

    def __init__(self, runner=None):
        self._runner = runner or ProcessRunner()

    def install(self, project_dir):
        """Run INSTALL_COMMAND in project_dir.

        Raises:
            CommandFailedError: If the command exits non-zero.
        """
        result = self._runner.run(INSTALL_COMMAND, cwd=project_dir)
        if result.returncode != 0:
            raise CommandFailedError("bun install", result.returncode, result.stderr)
