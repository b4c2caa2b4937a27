"""
Argument assembler — one compiler argv (without the executable) per target.
"""
from typing import List, Sequence

from chroma.core.definitions import MacroDefinition
from chroma.io.schema import TargetDescriptor


def assemble(
    defs: Sequence[MacroDefinition],
    edition: str,
    target: TargetDescriptor,
    output_dir: str,
) -> List[str]:
    """
    Build the argument list for compiling *target*.

    Order is fixed: ``-D`` flags as received, ``-o <output_dir>/<name>``,
    ``-std=<edition>``, then the source path.  The path is not checked;
    a missing source surfaces as a compiler failure.
    """
    args = [d.to_flag() for d in defs]
    args.append("-o")
    args.append(f"{output_dir}/{target.name}")
    args.append(f"-std={edition}")
    args.append(target.path)
    return args
