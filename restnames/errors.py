"""Exceptions raised by the naming rules."""

from __future__ import annotations


class NamingError(ValueError):
    """Base class for naming failures."""


class MalformedPathError(NamingError):
    """The path has no segment to derive a model name from."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed path {path!r}: {reason}")


class VerbMapError(NamingError):
    """A custom verb map cannot be used to build method names."""


class DescriptionError(NamingError):
    """An API description is not shaped like a Swagger/OpenAPI document."""
