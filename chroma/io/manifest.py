"""
Manifest — locate the project root and load ``chroma.toml``.

The root is returned as a path and threaded through the rest of the run;
the process working directory is never changed.
"""
import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from chroma import MANIFEST_FILENAME
from chroma.errors import ManifestNotFound, ManifestParseError, ProjectRootNotFound
from chroma.io.schema import Configuration

logger = logging.getLogger(__name__)


def find_project_root(start: Path, filename: str = MANIFEST_FILENAME) -> Path:
    """
    Walk upward from *start* and return the first directory holding *filename*.

    Raises
    ------
    ProjectRootNotFound
        If no directory up to the filesystem root contains the manifest.
    """
    start = Path(start).resolve()
    for candidate in (start, *start.parents):
        if (candidate / filename).is_file():
            logger.debug("Project root: %s", candidate)
            return candidate
    raise ProjectRootNotFound(
        f"could not find {filename} in {start} or any parent directory"
    )


def parse_manifest(text: str, source: str = MANIFEST_FILENAME) -> Configuration:
    """Parse manifest *text* into a Configuration."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(f"{source}: invalid TOML: {e}") from e

    try:
        return Configuration.model_validate(data)
    except ValidationError as e:
        raise ManifestParseError(f"{source}: {e}") from e


def load_manifest(root: Path, filename: str = MANIFEST_FILENAME) -> Configuration:
    """
    Read and parse ``<root>/<filename>``.

    Raises
    ------
    ManifestNotFound
        If the file does not exist or cannot be read.
    ManifestParseError
        If it is not UTF-8, not valid TOML, or does not match the manifest schema.
    """
    path = Path(root) / filename
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ManifestNotFound(f"manifest not found: {path}") from e
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"{path}: not valid UTF-8: {e}") from e
    except OSError as e:
        raise ManifestNotFound(f"cannot read manifest {path}: {e}") from e

    config = parse_manifest(text, source=str(path))
    logger.info(
        "Loaded %s: %s %s (%d target(s))",
        path, config.package.name, config.package.version, len(config.targets),
    )
    return config
