"""File I/O utilities: decoded line reading, YAML config, atomic JSON writes."""

from __future__ import annotations

import json
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

_yaml = YAML(typ="safe")


def read_lines(path: Path | str, *, encoding: str = "utf-8-sig") -> Iterator[str]:
    """Return an iterator over the decoded lines of a text export."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"EDL file not found: {path}")

    return _iter_lines(path, encoding)


def _iter_lines(path: Path, encoding: str) -> Iterator[str]:
    with open(path, encoding=encoding) as f:
        yield from f


def read_yaml(path: Path | str) -> dict:
    """Read a YAML file and return as dict."""
    path = Path(path)
    with open(path) as f:
        return dict(_yaml.load(f) or {})


def write_atomic(path: Path | str, data: Any) -> None:
    """Write data to a file atomically (write to temp, then rename)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        dir=path.parent,
        suffix=path.suffix,
        delete=False,
    ) as tmp:
        if isinstance(data, str):
            tmp.write(data)
        else:
            json.dump(data, tmp, indent=2, default=str)
        tmp_path = Path(tmp.name)

    tmp_path.replace(path)


def write_json(path: Path | str, data: Any) -> None:
    """Write data to a JSON file atomically."""
    write_atomic(path, data)
