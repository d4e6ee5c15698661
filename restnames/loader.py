"""Load API descriptions and naming options from disk.

Only the ``paths`` table of a Swagger/OpenAPI description is used; the
document is not validated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .config import NamingOptions
from .errors import DescriptionError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _read_document(path: Path) -> Any:
    with open(path) as f:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(f)
        return json.load(f)


def load_spec(path: str | Path) -> dict[str, Any]:
    """Load a Swagger/OpenAPI description (JSON, or YAML by extension)."""
    spec_file = Path(path)
    spec = _read_document(spec_file) or {}
    if not isinstance(spec, dict):
        raise DescriptionError(f"{spec_file}: top level must be a mapping, got {type(spec).__name__}")
    logger.debug("Loaded %s (%d paths)", spec_file, len(get_paths(spec)))
    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    paths = spec.get("paths") or {}
    if not isinstance(paths, dict):
        raise DescriptionError(f"paths must be a mapping, got {type(paths).__name__}")
    return paths


def get_base_path(spec: dict[str, Any]) -> str:
    """Swagger 2 ``basePath``, or an empty string."""
    return spec.get("basePath", "")


def load_options(path: str | Path) -> NamingOptions:
    """Load naming options from a JSON/YAML file.

    The file holds either ``{"verb_map": {...}}`` (``verbMap`` also accepted)
    or a bare verb to prefix mapping.
    """
    options_file = Path(path)
    data = _read_document(options_file) or {}
    logger.debug("Loaded naming options from %s", options_file)
    if isinstance(data, dict) and {"verb_map", "verbMap"} & data.keys():
        return NamingOptions.from_mapping(data)
    return NamingOptions(verb_map=data)
