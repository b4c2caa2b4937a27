"""
chroma — manifest-driven build driver for small native C/C++ packages.

Reads ``chroma.toml``, derives version macros from the package metadata
and invokes the compiler once per ``[[bin]]`` target.
"""

__version__ = "0.1.0"
PACKAGE_NAME = "chroma"
MANIFEST_FILENAME = "chroma.toml"
RECEIPT_SCHEMA_VERSION = "0.1"
