"""
Schema — Pydantic models for the manifest and the build receipt.

Manifest (``chroma.toml``)::

    [package]
    name = "hello chroma"
    version = "1.2.3"
    edition = "c++17"

    [[bin]]
    name = "main"
    path = "src/main.cpp"

Receipt (optional, ``--receipt``): one JSON document per run recording
what was compiled, with which command, and how it ended.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from chroma import PACKAGE_NAME, RECEIPT_SCHEMA_VERSION, __version__


# ── Manifest model ───────────────────────────────────────────────────────────

class PackageMetadata(BaseModel):
    """The ``[package]`` table."""
    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(min_length=1)
    version: StrictStr      # dot-delimited, not validated
    edition: StrictStr      # passed verbatim to -std=


class TargetDescriptor(BaseModel):
    """One ``[[bin]]`` entry."""
    model_config = ConfigDict(frozen=True)

    name: StrictStr
    path: StrictStr


class Configuration(BaseModel):
    """A parsed manifest. Target order is manifest order."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    package: PackageMetadata
    targets: Tuple[TargetDescriptor, ...] = Field(alias="bin")


# ── Build receipt ────────────────────────────────────────────────────────────

class TargetStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    SPAWN_ERROR = "SPAWN_ERROR"


class BuildStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class TargetResult(BaseModel):
    """Outcome of compiling one target."""

    name: str
    command: List[str]
    exit_code: Optional[int] = None     # None when the process never started
    duration_ms: int = 0
    status: TargetStatus


class DefinitionEntry(BaseModel):
    name: str
    value: str


class BuildReceipt(BaseModel):
    """Single receipt per run, written on success and on failure."""

    package_name: str = PACKAGE_NAME
    driver_version: str = __version__
    schema_version: str = RECEIPT_SCHEMA_VERSION

    project_root: str
    package: PackageMetadata
    definitions: List[DefinitionEntry] = Field(default_factory=list)
    targets: List[TargetResult] = Field(default_factory=list)

    status: BuildStatus = BuildStatus.SUCCESS
    failed_target: Optional[str] = None

    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
