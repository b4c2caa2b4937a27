"""
Shared pytest fixtures for chroma tests.

Provides sample manifests written into temporary project directories and
a recording compiler runner so that orchestration can be tested without
a toolchain.  The end-to-end test that runs the real g++ is skipped when
g++ is not installed.
"""
import shutil
import textwrap
from pathlib import Path
from typing import Dict, List, Sequence

import pytest

from chroma.io.compiler import CompileOutcome, CompilerRunner

HELLO_MANIFEST = textwrap.dedent("""\
    [package]
    name = "hello chroma"
    version = "1.2.3"
    edition = "c++17"

    [[bin]]
    name = "main"
    path = "src/main.cpp"
""")

TWO_TARGET_MANIFEST = textwrap.dedent("""\
    [package]
    name = "pair"
    version = "0.4"
    edition = "c++20"

    [[bin]]
    name = "first"
    path = "src/first.cpp"

    [[bin]]
    name = "second"
    path = "src/second.cpp"
""")

HELLO_CPP = textwrap.dedent("""\
    #include <cstdio>

    int main() {
    #if HELLO_CHROMA && HELLO_CHROMA_MAJOR == 1 && HELLO_CHROMA_MINOR == 2
        std::printf("%s\\n", HELLO_CHROMA_VERSION);
        return 0;
    #else
        return 1;
    #endif
    }
""")


class RecordingRunner(CompilerRunner):
    """
    Stand-in compiler: records every call and returns scripted exit codes.

    ``exit_codes`` maps an output name (``build/<target>``) to the exit code
    to report; unlisted targets succeed.  Targets listed in ``unspawnable``
    raise ``FileNotFoundError`` as if the executable were missing.
    """

    def __init__(
        self,
        exit_codes: Dict[str, int] | None = None,
        unspawnable: Sequence[str] = (),
    ):
        super().__init__("fake-c++")
        self.exit_codes = dict(exit_codes or {})
        self.unspawnable = set(unspawnable)
        self.calls: List[List[str]] = []
        self.cwds: List[Path] = []

    def run(self, args, cwd):
        out = args[args.index("-o") + 1]
        if out in self.unspawnable:
            raise FileNotFoundError(2, "No such file or directory", self.executable)
        self.calls.append(list(args))
        self.cwds.append(Path(cwd))
        return CompileOutcome(exit_code=self.exit_codes.get(out, 0), duration_ms=1)


def write_project(root: Path, manifest: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "chroma.toml").write_text(manifest)
    return root


@pytest.fixture
def hello_project(tmp_path) -> Path:
    """Project root holding the hello-chroma manifest and source."""
    root = write_project(tmp_path / "hello", HELLO_MANIFEST)
    (root / "src").mkdir()
    (root / "src" / "main.cpp").write_text(HELLO_CPP)
    return root


@pytest.fixture
def two_target_project(tmp_path) -> Path:
    return write_project(tmp_path / "pair", TWO_TARGET_MANIFEST)


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture(scope="session")
def gxx_ok():
    """Skip tests if g++ is not available."""
    if shutil.which("g++") is None:
        pytest.skip("g++ not available - install g++ to run these tests")


@pytest.fixture
def make_runner():
    """Factory for RecordingRunner with scripted outcomes."""
    return RecordingRunner
