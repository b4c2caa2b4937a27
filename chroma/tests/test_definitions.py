"""
test_definitions — macro derivation from package metadata.
"""
import pytest

from chroma.core.definitions import MacroDefinition, derive
from chroma.io.schema import PackageMetadata


def _pkg(name="hello chroma", version="1.2.3", edition="c++17"):
    return PackageMetadata(name=name, version=version, edition=edition)


class TestDerive:

    def test_full_version(self):
        defs = derive(_pkg())
        assert [tuple(d) for d in defs] == [
            ("HELLO_CHROMA", "1"),
            ("HELLO_CHROMA_VERSION", '"1.2.3"'),
            ("HELLO_CHROMA_MAJOR", "1"),
            ("HELLO_CHROMA_MINOR", "2"),
            ("HELLO_CHROMA_PATCH", "3"),
        ]

    def test_single_component(self):
        defs = derive(_pkg(name="tool", version="2"))
        assert [d.name for d in defs] == ["TOOL", "TOOL_VERSION", "TOOL_MAJOR"]
        assert defs[-1].value == "2"

    def test_extra_components_ignored(self):
        defs = derive(_pkg(name="x", version="1.2.3.4.5"))
        assert len(defs) == 5
        assert defs[-1] == MacroDefinition("X_PATCH", "3")
        assert defs[1].value == '"1.2.3.4.5"'

    def test_empty_version_emits_empty_major(self):
        defs = derive(_pkg(name="x", version=""))
        assert [tuple(d) for d in defs] == [
            ("X", "1"),
            ("X_VERSION", '""'),
            ("X_MAJOR", ""),
        ]

    def test_components_are_raw_tokens(self):
        defs = derive(_pkg(name="x", version="1.0-rc1.7"))
        assert defs[2:] == [
            MacroDefinition("X_MAJOR", "1"),
            MacroDefinition("X_MINOR", "0-rc1"),
            MacroDefinition("X_PATCH", "7"),
        ]

    @pytest.mark.parametrize("version,k", [("7", 1), ("7.1", 2), ("7.1.0", 3)])
    def test_count_is_two_plus_components(self, version, k):
        defs = derive(_pkg(name="p", version=version))
        suffixes = ["P_MAJOR", "P_MINOR", "P_PATCH"][:k]
        assert len(defs) == 2 + k
        assert [d.name for d in defs] == ["P", "P_VERSION", *suffixes]

    def test_to_flag(self):
        assert MacroDefinition("A", '"1"').to_flag() == '-DA="1"'
