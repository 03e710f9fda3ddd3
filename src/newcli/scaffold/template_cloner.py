"""TemplateCloner: fetches the template repository into a staging directory."""

import os
import shutil

from newcli.scaffold.errors import CommandFailedError
from newcli.scaffold.process_runner import ProcessRunner

# Never let git ask for credentials on the terminal.
_NON_INTERACTIVE_ENV = {"GIT_TERMINAL_PROMPT": "0"}


def clone_command(template_source, destination):
    return ["git", "clone", "--depth", "1", "--quiet", template_source, destination]


class TemplateCloner:
    """Creates a shallow checkout of the template without its .git metadata."""

    def __init__(self, runner=None):
        self._runner = runner or ProcessRunner()

    def clone(self, template_source, destination):
        """Shallow-clone template_source into destination, then strip .git.

        Raises:
            CommandFailedError: If git exits non-zero.
        """
        cmd = clone_command(template_source, destination)
        result = self._runner.run(cmd, env=_NON_INTERACTIVE_ENV)
        if result.returncode != 0:
            raise CommandFailedError("git clone", result.returncode, result.stderr)
        shutil.rmtree(os.path.join(destination, ".git"), ignore_errors=True)
