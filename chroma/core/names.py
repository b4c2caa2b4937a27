"""
Name helpers — turn package metadata into compiler-visible tokens.

  - ``normalize`` maps a free-form package name to a macro identifier.
  - ``quote`` wraps a value as a C string literal for ``-D`` flags.
"""
import string

_IDENT_CHARS = frozenset(string.ascii_letters + string.digits)


def normalize(name: str) -> str:
    """
    Upper-case ASCII letters, keep ASCII digits, map everything else to ``_``.

    ``normalize("hello-chroma 2") == "HELLO_CHROMA_2"``.  Idempotent.
    """
    return "".join(c.upper() if c in _IDENT_CHARS else "_" for c in name)


def quote(value: str) -> str:
    """
    Wrap *value* in double quotes.

    Embedded ``"`` and ``\\`` are NOT escaped: a version such as
    ``1.0"beta`` produces a malformed literal on the command line.
    """
    return f'"{value}"'
