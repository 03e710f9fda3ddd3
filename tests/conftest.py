"""Shared fixtures for new-cli tests."""

import os
import sys

import pytest

# Ensure tests/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_process_runner import FakeProcessRunner  # noqa: E402
from template_fixtures import TEMPLATE_FILES, write_template  # noqa: E402


@pytest.fixture
def fake_runner():
    """FakeProcessRunner whose ``git clone`` writes TEMPLATE_FILES."""
    runner = FakeProcessRunner()
    runner.on("git", write_template(TEMPLATE_FILES))
    return runner


@pytest.fixture
def workspace(tmp_path):
    """A parent directory to scaffold into; staging directories appear here."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root
