"""
Compiler — run the native compiler and prepare the output directory.

The compiler inherits stdout/stderr; only the exit status is used.
There is no timeout: a hung compiler blocks the build.
"""
import logging
import shlex
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from chroma.errors import OutputDirectoryCreateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileOutcome:
    exit_code: int
    duration_ms: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CompilerRunner:
    """Spawns *executable* with the assembled arguments and waits for it."""

    def __init__(self, executable: str = "g++"):
        self.executable = executable

    def command(self, args: Sequence[str]) -> List[str]:
        return [self.executable, *args]

    def run(self, args: Sequence[str], cwd: Path) -> CompileOutcome:
        """
        Run the compiler in *cwd* and block until it exits.

        Raises ``OSError`` if the executable cannot be started.
        """
        cmd = self.command(args)
        logger.debug("Running in %s: %s", cwd, shlex.join(cmd))

        t0 = time.monotonic()
        result = subprocess.run(cmd, cwd=str(cwd))
        duration = int((time.monotonic() - t0) * 1000)

        return CompileOutcome(exit_code=result.returncode, duration_ms=duration)


def ensure_output_dir(root: Path, output_dir: str) -> Path:
    """Create ``<root>/<output_dir>`` if missing and return it."""
    path = Path(root) / output_dir
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryCreateError(
            f"couldn't create {path}: {e}"
        ) from e
    return path
