"""Naming options: the HTTP verb to method-prefix mapping.

A custom verb map replaces the default one wholesale, there is no per-key
merge. Since unknown verbs fall back to the ``GET`` prefix, every custom map
must carry a ``GET`` entry; this is checked when the options are built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import VerbMapError

DEFAULT_VERB_MAP: Mapping[str, str] = MappingProxyType({
    "POST": "create",
    "GET": "find",
    "PUT": "update",
    "DELETE": "delete",
})

# Option keys accepted by from_mapping; verbMap is the camelCase spelling
# used by JavaScript-side configuration files.
_VERB_MAP_KEYS = ("verb_map", "verbMap")


def _normalize_verb_map(verb_map: Mapping[str, Any]) -> Mapping[str, str]:
    if not isinstance(verb_map, Mapping):
        raise VerbMapError(f"verb map must be a mapping, got {type(verb_map).__name__}")
    if not verb_map:
        raise VerbMapError("verb map is empty")

    normalized: dict[str, str] = {}
    for verb, prefix in verb_map.items():
        if not isinstance(verb, str) or not isinstance(prefix, str):
            raise VerbMapError(f"verb map entry {verb!r}: {prefix!r} must map a string to a string")
        if not prefix:
            raise VerbMapError(f"verb map entry {verb!r} has an empty prefix")
        normalized[verb.upper()] = prefix

    if "GET" not in normalized:
        raise VerbMapError("verb map has no GET entry to fall back on for unknown verbs")
    return MappingProxyType(normalized)


@dataclass(frozen=True)
class NamingOptions:
    """Configuration for method-name synthesis."""

    verb_map: Mapping[str, str] = field(default_factory=lambda: DEFAULT_VERB_MAP)

    def __post_init__(self) -> None:
        if self.verb_map is not DEFAULT_VERB_MAP:
            object.__setattr__(self, "verb_map", _normalize_verb_map(self.verb_map))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> NamingOptions:
        """Build options from a plain mapping such as ``{"verb_map": {...}}``.

        A mapping with neither ``verb_map`` nor ``verbMap`` (or whose value is
        None) yields the defaults.
        """
        if not data:
            return cls()
        for key in _VERB_MAP_KEYS:
            if data.get(key) is not None:
                return cls(verb_map=data[key])
        return cls()

    def prefix_for(self, verb: str) -> str:
        """Return the method prefix for an upper-case verb, defaulting to GET's."""
        return self.verb_map.get(verb, self.verb_map["GET"])


def resolve_options(options: NamingOptions | Mapping[str, Any] | None) -> NamingOptions:
    """Coerce whatever the caller passed into ``NamingOptions``."""
    if isinstance(options, NamingOptions):
        return options
    return NamingOptions.from_mapping(options)
