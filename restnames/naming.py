"""Convert HTTP verb + path template to model and method names.

Pattern: {prefix}{Suffix}
  - GET collection             -> findAll
  - GET collection/{id}        -> findOne
  - POST collection            -> create
  - PUT collection/{id}        -> update
  - DELETE collection/{id}     -> delete

The first path segment names the model (a leading version segment such as
v1 or v2.0 is skipped) and never takes part in the method name.

Examples:
  GET    app                                                -> findAll
  POST   app                                                -> create
  GET    app/{id}                                           -> findOne
  POST   app/saveFromTiApp                                  -> createSaveFromTiApp
  PUT    app/{id}                                           -> update
  GET    app/{app_guid}/module/{module_guid}/verification   -> findModuleVerification
  DELETE acs/{app_guid}/push_devices/{app_env}/unsubscribe  -> deletePushDevicesUnsubscribe
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .config import NamingOptions, resolve_options
from .errors import MalformedPathError
from .text import capitalize, classify, has_chars, is_path_var, is_version_segment, split_path

logger = logging.getLogger(__name__)

_PATH_VAR = re.compile(r"\{([^}]*)\}")

# Literal segments containing any of these are treated as multi-word
_WORD_SEPARATORS = "_-."


@dataclass(frozen=True)
class NamedOperation:
    """Every name derived from one (verb, path) pair."""

    verb: str
    path: str
    model: str
    method: str
    path_vars: tuple[str, ...]


def _normalize_verb(verb: str | None) -> str:
    return (verb or "GET").upper()


def extract_model_name(path: str) -> str:
    """Grab the first real component of the path as a PascalCase model name.

    Raises MalformedPathError if the path (or, after a version segment, the
    rest of it) has no component to name the model after.
    """
    segments = split_path(path)
    index = 1 if is_version_segment(segments[0]) else 0

    if index >= len(segments) or not segments[index]:
        reason = "no segment after version marker" if index else "no model segment"
        raise MalformedPathError(path, reason)

    return classify(segments[index])


def extract_path_vars(url: str) -> list[str]:
    """Parse path variables from a swagger formatted URL.

    ``http://foo.com/bar/{id}`` gives ``["id"]``. Order and duplicates are
    kept.
    """
    return _PATH_VAR.findall(url)


def _segment_suffix(segment: str) -> str:
    if has_chars(segment, _WORD_SEPARATORS):
        return classify(segment)
    return capitalize(segment)


def synthesize_method_name(
    options: NamingOptions | Mapping[str, Any] | None,
    verb: str | None,
    path: str,
) -> str:
    """Turn an HTTP verb and path into a method name.

    *options* may be ``NamingOptions``, a mapping holding ``verb_map`` (or
    ``verbMap``), or None for the default verb map.
    """
    naming_options = resolve_options(options)
    verb = _normalize_verb(verb)

    segments = split_path(path)
    if not segments or not segments[0]:
        raise MalformedPathError(path, "no model segment")

    # The first segment names the model, not the method. Empty segments
    # (trailing or doubled slashes) count as literals.
    remaining = segments[1:]

    name = naming_options.prefix_for(verb)

    if not remaining:
        if verb != "POST":
            name += "All"
    else:
        all_params = True
        for segment in remaining:
            if is_path_var(segment):
                continue
            name += _segment_suffix(segment)
            all_params = False
        if all_params and verb == "GET":
            name += "One"

    logger.debug("%s %s -> %s", verb, path, name)
    return name


def describe_operation(
    verb: str | None,
    path: str,
    options: NamingOptions | Mapping[str, Any] | None = None,
) -> NamedOperation:
    """Derive model name, method name and path variables for one operation."""
    return NamedOperation(
        verb=_normalize_verb(verb),
        path=path,
        model=extract_model_name(path),
        method=synthesize_method_name(options, verb, path),
        path_vars=tuple(extract_path_vars(path)),
    )
