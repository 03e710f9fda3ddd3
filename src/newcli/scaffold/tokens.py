"""Replace the project-name placeholders in copied template files."""

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from newcli.scaffold.naming import normalize_package_name

PROJECT_NAME_TOKEN = "__PROJECT_NAME__"
PACKAGE_NAME_TOKEN = "__PACKAGE_NAME__"

TEXT_EXTENSIONS = frozenset({
    ".json", ".ts", ".tsx", ".js", ".jsx", ".md", ".txt", ".toml", ".yaml", ".yml",
})
IGNORE_FILE_SUFFIX = ".gitignore"


def is_template_text_file(path: str) -> bool:
    """Return True if path is a file type that may contain placeholder tokens."""
    _, ext = os.path.splitext(path)
    return ext in TEXT_EXTENSIONS or path.endswith(IGNORE_FILE_SUFFIX)


def substitute_tokens(content: str, project_name: str, package_name: str) -> str:
    return (
        content
        .replace(PROJECT_NAME_TOKEN, project_name)
        .replace(PACKAGE_NAME_TOKEN, package_name)
    )


def _rewrite_file(path: str, project_name: str, package_name: str) -> bool:
    """Substitute tokens in one file; return True if the file was rewritten."""
    # newline="" and surrogateescape keep line endings and undecodable bytes intact
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        original = f.read()
    updated = substitute_tokens(original, project_name, package_name)
    if updated == original:
        return False
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(updated)
    return True


def apply_template_tokens(file_paths: Iterable[str], project_name: str) -> int:
    """Substitute placeholder tokens in every text-like file of file_paths.

    Files are independent, so they are rewritten concurrently. The first
    error raised by any file propagates.

    Returns:
        The number of files that were rewritten.
    """
    package_name = normalize_package_name(project_name)
    # links are copied as links; rewriting one would edit whatever it points at
    candidates = [p for p in file_paths if is_template_text_file(p) and not os.path.islink(p)]
    if not candidates:
        return 0
    with ThreadPoolExecutor() as executor:
        rewritten = list(executor.map(
            lambda p: _rewrite_file(p, project_name, package_name), candidates,
        ))
    return sum(rewritten)
