"""Derive a package name from a free-form project name."""

import re

DEFAULT_PACKAGE_NAME = "bun-app"

_DISALLOWED = re.compile(r"[^a-z0-9\-_]")
_HYPHEN_RUN = re.compile(r"-+")


def normalize_package_name(project_name: str) -> str:
    """Lowercase the name and reduce it to ``[a-z0-9-_]`` joined by single hyphens.

    Falls back to DEFAULT_PACKAGE_NAME when nothing usable remains.
    """
    name = _DISALLOWED.sub("-", project_name.strip().lower())
    name = _HYPHEN_RUN.sub("-", name).strip("-")
    return name or DEFAULT_PACKAGE_NAME
