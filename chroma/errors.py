"""
Errors raised by the build driver.

Every error is terminal for the run: the CLI maps any ``ChromaError``
to a non-zero exit code and nothing is retried.
"""
from typing import List, Optional


class ChromaError(Exception):
    """Base class for all driver failures."""


class ManifestNotFound(ChromaError):
    """The manifest file does not exist at the project root."""


class ManifestParseError(ChromaError):
    """The manifest is not valid TOML or is missing/mistyping fields."""


class ProjectRootNotFound(ManifestNotFound):
    """No directory from the start path up to ``/`` holds a manifest."""


class OutputDirectoryCreateError(ChromaError):
    """The build output directory could not be created."""


class ReceiptWriteError(ChromaError):
    """The build receipt could not be written after a successful build."""


class BuildError(ChromaError):
    """
    A target failed to compile.

    ``results`` holds the per-target results gathered before the failure,
    including the failing target itself.
    """

    def __init__(self, target: str, message: str, results: Optional[List] = None):
        super().__init__(message)
        self.target = target
        self.results = list(results or [])


class CompilerSpawnError(BuildError):
    """The compiler process could not be started."""


class CompilerNonSuccessExit(BuildError):
    """The compiler exited with a non-zero status."""

    def __init__(self, target: str, exit_code: int, results: Optional[List] = None):
        super().__init__(
            target,
            f"Error when compiling {target} (exit code {exit_code})",
            results,
        )
        self.exit_code = exit_code
