"""YAML case file helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_yaml_file(path: str | Path) -> Any:
    """Parsed YAML document; an empty file reads as ``None``.

    Shape checks belong to the caller, which knows which entries it expects.
    """
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)
