"""String classification helpers shared by the naming rules."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")

# Optional v/V, digit groups optionally dot-separated: v1, 2, v2.1
_VERSION_SEGMENT = re.compile(r"[vV]?\d+(?:\.\d+)*")


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def classify(text: str) -> str:
    """Convert a separator-delimited string to PascalCase.

    Splits on anything that is not an ASCII letter or digit (``_`` included)
    and capitalizes each piece without lowering the rest, so camelCase input
    keeps its inner humps::

        push_devices  -> PushDevices
        saveFromTiApp -> SaveFromTiApp
    """
    return "".join(capitalize(word) for word in _SEPARATORS.split(text) if word)


def has_chars(text: str, chars: str) -> bool:
    """Return True if *text* contains at least one of *chars*."""
    return any(char in text for char in chars)


def is_version_segment(segment: str) -> bool:
    """Check whether a path segment is an API version marker."""
    return _VERSION_SEGMENT.fullmatch(segment) is not None


def is_path_var(segment: str) -> bool:
    return segment.startswith("{")


def split_path(path: str) -> list[str]:
    """Split a path on ``/``, dropping the empty segment of a leading slash."""
    segments = path.split("/")
    if path.startswith("/"):
        segments = segments[1:]
    return segments
