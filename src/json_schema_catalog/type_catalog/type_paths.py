"""Schema identifier and type path model."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import SplitResult, urlsplit, urlunsplit

TypePath = str
"""URI fragment locating a type inside its owning schema, e.g. ``#/properties/x``."""

ROOT_TYPE_PATH: TypePath = "#"


@dataclass(frozen=True)
class SchemaId:
    """Validated URI identifying one schema document."""

    uri: SplitResult
    empty_fragment: bool = False

    @classmethod
    def parse(cls, value: str) -> SchemaId:
        """Split ``value`` into a schema id; raises ValueError for malformed URIs."""
        uri = urlsplit(value)
        return cls(uri=uri, empty_fragment=value.endswith("#") and not uri.fragment)

    @property
    def scheme(self) -> str:
        """Return the lower-cased URI scheme."""
        return self.uri.scheme

    def __str__(self) -> str:
        rendered = self.uri.geturl()
        return f"{rendered}#" if self.empty_fragment else rendered


def normalize_uri(value: str) -> str:
    """Round-trip ``value`` through URI parsing, keeping an explicit empty fragment.

    Raises:
      ValueError: If the value cannot be split into URI components.
    """
    normalized = urlunsplit(urlsplit(value))
    if value.endswith("#") and not normalized.endswith("#"):
        normalized = f"{normalized}#"
    return normalized


def escape_segment(segment: str) -> str:
    """Escape one JSON-pointer reference token."""
    return segment.replace("~", "~0").replace("/", "~1")


def add_child(type_path: TypePath, *segments: str | int) -> TypePath:
    """Extend ``type_path`` with the given JSON-pointer segments."""
    extended = type_path
    for segment in segments:
        extended = f"{extended}/{escape_segment(str(segment))}"
    return extended
