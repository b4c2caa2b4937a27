"""
Definition deriver — package metadata → ordered macro definitions.

For a package named ``hello chroma`` at version ``1.2.3``::

    HELLO_CHROMA=1
    HELLO_CHROMA_VERSION="1.2.3"
    HELLO_CHROMA_MAJOR=1
    HELLO_CHROMA_MINOR=2
    HELLO_CHROMA_PATCH=3

Component macros are emitted only for the components present in the
version string (no zero-fill, anything past the third is ignored).
"""
from dataclasses import dataclass
from typing import Iterator, List

from chroma.core.names import normalize, quote
from chroma.io.schema import PackageMetadata

VERSION_SUFFIXES = ("_MAJOR", "_MINOR", "_PATCH")


@dataclass(frozen=True)
class MacroDefinition:
    """A ``-D<name>=<value>`` pair."""

    name: str
    value: str

    def __iter__(self) -> Iterator[str]:
        yield self.name
        yield self.value

    def to_flag(self) -> str:
        return f"-D{self.name}={self.value}"


def derive(pkg: PackageMetadata) -> List[MacroDefinition]:
    """Derive the macro definitions for *pkg*, in their fixed order."""
    name = normalize(pkg.name)

    definitions = [
        MacroDefinition(name, "1"),
        MacroDefinition(name + "_VERSION", quote(pkg.version)),
    ]

    # "".split(".") == [""], so an empty version still yields an empty _MAJOR
    components = pkg.version.split(".")[: len(VERSION_SUFFIXES)]
    for suffix, component in zip(VERSION_SUFFIXES, components):
        definitions.append(MacroDefinition(name + suffix, component))

    return definitions
