"""A text-map carrier over gRPC-style metadata."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MetadataCarrier:
    """Reads and writes propagation headers in a metadata mapping.

    The mapping holds lower-case keys with lists of values; it is shared,
    so writes are visible to the owner of the mapping.
    """

    metadata: dict[str, list[str]] = field(default_factory=dict)

    def get(self, key: str) -> str:
        """Return the first value stored under key, or an empty string."""
        values = self.metadata.get(key.lower())
        if not values:
            return ""
        return values[0]

    def set(self, key: str, value: str) -> None:
        """Replace the values stored under key with a single value."""
        self.metadata[key.lower()] = [value]

    def keys(self) -> list[str]:
        """Return the keys present in the metadata."""
        return list(self.metadata)