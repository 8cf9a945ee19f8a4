"""File IO and diagnostics helpers for the command line."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]


def read_yaml(path: PathLike) -> Any:
    """Load a YAML (or JSON) document; an empty file yields ``None``."""

    return yaml.safe_load(Path(path).read_text(encoding="utf-8"))


def write_html(path: PathLike, html: str) -> Path:
    """Write rendered markup as a UTF-8 file ending in a newline."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(html if html.endswith("\n") else html + "\n", encoding="utf-8")
    return target


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["PathLike", "read_yaml", "warn", "write_html"]
