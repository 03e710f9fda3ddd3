"""ProcessRunner: the subprocess boundary used for cloning and installing.

Scaffolding code only talks to an object with a ``run(cmd, cwd, env)``
method, so tests can pass a FakeProcessRunner instead of spawning git or bun.
"""

import os
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class ProcessResult:
    """Exit code and captured stderr of a finished command."""
    returncode: int
    stderr: str = ""


class ProcessRunner:
    """Runs commands quietly: stdout is discarded, stderr is captured.

    No timeout is applied; a hung command blocks the caller.
    """

    def run(self, cmd: List[str], cwd: Optional[str] = None,
            env: Optional[Dict[str, str]] = None) -> ProcessResult:
        full_env = None
        if env:
            full_env = {**os.environ, **env}
        result = subprocess.run(
            cmd,
            cwd=cwd,
            env=full_env,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
        return ProcessResult(returncode=result.returncode, stderr=(result.stderr or "").strip())
