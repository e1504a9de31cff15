"""Merging of the two template manifests and READMEs."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from ..utils import load_json


class ManifestError(Exception):
    """Raised when a template manifest cannot be read as a JSON object."""

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(message)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with *override* taking precedence.

    Nested dictionaries are merged recursively and lists are concatenated
    (base items first).  Any other value in *override* replaces the base
    value.  Neither input is modified.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = current + copy.deepcopy(value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_manifest(path: str | Path) -> dict[str, Any]:
    """Read a manifest file and return its top-level object.

    Raises:
        FileNotFoundError: If the file does not exist.
        ManifestError: If the file is not valid JSON or not a JSON object.
    """
    path = Path(path)
    try:
        data = load_json(path)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}", path) from exc
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} must contain a JSON object", path)
    return data


def merge_manifests(
    frontend: dict[str, Any], backend: dict[str, Any], project_name: str
) -> dict[str, Any]:
    """Merge the backend manifest onto the frontend one and set ``name``.

    The name keeps its position when the merged manifest already has one.
    """
    merged = deep_merge(frontend, backend)
    merged["name"] = project_name
    return merged


def concatenate_docs(frontend: str, backend: str, separator: str = "\n\n") -> str:
    """Join the two README texts with *separator*."""
    return f"{frontend}{separator}{backend}"
