from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional


def configure_logging(verbose: bool = False) -> None:
    """Console logging for the CLI; DEBUG also shows parser recovery events."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Path, output: Optional[str], suffix: str) -> Path:
    """Pick where the rendered post goes.

    No ``output`` means next to the input with ``suffix``; an existing
    directory gets ``<input stem><suffix>`` inside it.
    """
    if not output:
        return input_path.with_suffix(suffix)
    out_path = Path(output)
    if out_path.is_dir():
        return out_path / f"{input_path.stem}{suffix}"
    return out_path


def read_post(path: Path) -> str:
    # utf-8-sig drops a leading BOM so "# Title" on the first line stays a heading
    return path.read_text(encoding="utf-8-sig")
