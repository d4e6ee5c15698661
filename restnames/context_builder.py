"""Build the naming manifest context from an API description's paths.

Names every operation, groups operations by model and makes method names
unique within each model.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import NamingOptions, resolve_options
from .errors import MalformedPathError
from .loader import get_base_path, get_paths
from .naming import describe_operation

logger = logging.getLogger(__name__)

# Path item keys that are operations, in output order
_HTTP_VERBS = ("get", "post", "put", "delete", "patch")


def _make_summary(operation: dict[str, Any]) -> str:
    """Operation summary, else the first sentence of its description."""
    summary = (operation.get("summary") or "").strip()
    if summary:
        return summary.rstrip(". ")
    description = (operation.get("description") or "").strip()
    if description:
        return description.split(".")[0].strip()
    return ""


def _deduplicate_method_names(operations: list[dict[str, Any]]) -> None:
    """Ensure method names are unique per model by appending the verb if needed."""
    seen: set[tuple[str, str]] = set()
    for op in operations:
        key = (op["model"], op["name"])
        if key in seen:
            op["name"] = f"{op['name']}{op['verb'].capitalize()}"
        else:
            seen.add(key)

    final_seen: dict[tuple[str, str], int] = {}
    for op in operations:
        key = (op["model"], op["name"])
        if key in final_seen:
            final_seen[key] += 1
            op["name"] = f"{op['name']}{final_seen[key]}"
        else:
            final_seen[key] = 1


def build_context(
    spec: dict[str, Any],
    options: NamingOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the full template context from the API description."""
    naming_options = resolve_options(options)
    paths = get_paths(spec)
    operations: list[dict[str, Any]] = []
    skipped: list[str] = []

    for path, path_item in sorted(paths.items()):
        if not isinstance(path_item, dict):
            logger.warning("Skipping %s: path item is not a mapping", path)
            skipped.append(path)
            continue

        for verb in _HTTP_VERBS:
            if verb not in path_item:
                continue

            operation = path_item[verb]
            if not isinstance(operation, dict):
                operation = {}
            try:
                named = describe_operation(verb, path, naming_options)
            except MalformedPathError as e:
                logger.warning("Skipping %s %s: %s", verb.upper(), path, e.reason)
                skipped.append(f"{verb.upper()} {path}")
                continue

            operations.append({
                "model": named.model,
                "name": named.method,
                "verb": named.verb,
                "path": path,
                "path_vars": list(named.path_vars),
                "summary": _make_summary(operation),
            })

    _deduplicate_method_names(operations)

    models: dict[str, list[dict[str, Any]]] = {}
    for op in operations:
        models.setdefault(op["model"], []).append(op)

    info = spec.get("info")
    title = info.get("title") if isinstance(info, dict) else None

    return {
        "models": models,
        "operations": operations,
        "operation_count": len(operations),
        "skipped": skipped,
        "title": title or "API",
        "base_path": get_base_path(spec),
    }
