"""Errors raised while scaffolding a project."""


class ScaffoldError(Exception):
    """Base class for scaffold failures reported to the user."""


class DirectoryNotEmptyError(ScaffoldError):
    """The target directory has entries and overwriting was not requested."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Target directory is not empty: {path}. Use --force to overwrite.")


class CommandFailedError(ScaffoldError):
    """An external command (git clone, bun install) exited non-zero."""

    def __init__(self, label, returncode, stderr=""):
        self.returncode = returncode
        self.stderr = stderr
        suffix = f" {stderr}" if stderr else ""
        super().__init__(f"{label} failed with exit code {returncode}.{suffix}")
