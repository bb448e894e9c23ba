"""Utility helpers for reading tree/option files and writing output."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

JSON_SUFFIXES = {".json"}


def read_data(path: Path) -> Any:
    """Load a JSON file by suffix, anything else as YAML."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in JSON_SUFFIXES:
        return json.loads(text)
    return yaml.safe_load(text)


def write_text(path: Path, content: str) -> Path:
    """Write text content to a file, creating parent directories as needed."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["read_data", "warn", "write_text"]
