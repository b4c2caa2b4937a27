"""
Profile — which compiler to run and where things live.

Keeps toolchain and layout choices out of the orchestrator so that
switching to clang++ or another build directory is a settings change.
"""
from dataclasses import dataclass

from chroma import MANIFEST_FILENAME
from chroma.config import Settings


@dataclass(frozen=True)
class BuildProfile:
    """Toolchain and layout used for one run."""

    compiler: str = "g++"
    output_dir: str = "build"               # relative to the project root
    manifest_filename: str = MANIFEST_FILENAME

    @classmethod
    def default(cls) -> "BuildProfile":
        return cls()

    @classmethod
    def from_settings(cls, settings: Settings) -> "BuildProfile":
        return cls(
            compiler=settings.CHROMA_COMPILER,
            output_dir=settings.CHROMA_BUILD_DIR,
            manifest_filename=settings.CHROMA_MANIFEST,
        )
