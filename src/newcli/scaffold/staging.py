"""Staging directory for the freshly cloned template."""

import os
import shutil
import tempfile
from contextlib import contextmanager

STAGING_PREFIX = ".new-template-"


@contextmanager
def staging_directory(target_dir):
    """Create a uniquely named directory beside target_dir and always remove it.

    Usage:
        with staging_directory("/work/my-app") as staging:
            clone_into(staging)
    """
    parent = os.path.dirname(os.path.abspath(target_dir))
    staging = tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=parent)
    try:
        yield staging
    finally:
        shutil.rmtree(staging, ignore_errors=True)
