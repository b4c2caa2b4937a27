"""
Writer — serialize the build receipt to JSON.
"""
import json
from pathlib import Path

from chroma.io.schema import BuildReceipt


def write_receipt(receipt: BuildReceipt, path: Path) -> Path:
    """
    Write *receipt* to *path*, creating parent directories.

    Returns the receipt path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(
            receipt.model_dump(mode="json"),
            indent=2,
            sort_keys=True,
        )
        + "\n"
    )
    return path
