"""Read service documents and templates from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


class DocumentLoaderError(RuntimeError):
    """Raised when an input document is missing or cannot be parsed."""


def load_document(path: Path) -> dict[str, Any]:
    """Load a JSON or YAML mapping from ``path``.

    Files ending in ``.json`` are parsed as JSON; anything else goes through
    ``yaml.safe_load``, which also accepts JSON.
    """

    if not path.exists():
        raise DocumentLoaderError(f"Input file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        try:
            if path.suffix == ".json":
                data = json.load(handle)
            else:
                data = yaml.safe_load(handle)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise DocumentLoaderError(f"Invalid document: {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DocumentLoaderError(f"Expected a mapping at the top of {path}")
    return data


__all__ = ["DocumentLoaderError", "load_document"]
