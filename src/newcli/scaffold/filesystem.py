"""Filesystem helpers for scaffolding: emptiness checks, listing, copying."""

import os
import shutil
from typing import List


def is_directory_empty(path: str) -> bool:
    """Return True if path has no entries. A missing directory counts as empty."""
    try:
        return len(os.listdir(path)) == 0
    except FileNotFoundError:
        return True


def list_files_recursively(directory: str) -> List[str]:
    """Return every non-directory entry below directory, depth-first.

    Entries are visited in directory-listing order; symlinks are listed, not followed.
    """
    files = []
    with os.scandir(directory) as entries:
        for entry in entries:
            full_path = os.path.join(directory, entry.name)
            if entry.is_dir(follow_symlinks=False):
                files.extend(list_files_recursively(full_path))
                continue
            files.append(full_path)
    return files


def destination_paths(files: List[str], source_root: str, target_root: str) -> List[str]:
    """Map each path under source_root to the same relative path under target_root."""
    return [os.path.join(target_root, os.path.relpath(f, source_root)) for f in files]


def copy_tree(source: str, target: str):
    """Copy the contents of source into target, replacing entries that already exist.

    Only the children of source are copied; target's own mode and times are
    left alone. Symlinks are copied as links, matching list_files_recursively.
    """
    with os.scandir(source) as entries:
        for entry in entries:
            _copy_entry(entry.path, os.path.join(target, entry.name))


def _copy_entry(src, dst):
    if os.path.islink(src):
        _remove_file(dst)
        os.symlink(os.readlink(src), dst)
    elif os.path.isdir(src):
        if os.path.islink(dst):
            os.unlink(dst)
        os.makedirs(dst, exist_ok=True)
        copy_tree(src, dst)
    else:
        _remove_file(dst)
        shutil.copy2(src, dst)


def _remove_file(path):
    # a replaced symlink must not be written through
    if os.path.islink(path) or os.path.isfile(path):
        os.unlink(path)
