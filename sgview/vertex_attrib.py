"""Per-vertex attributes: position, normal and texture coordinate."""

from __future__ import annotations

from typing import Sequence

_DEFAULTS: dict[str, tuple[float, float, float, float]] = {
    "position": (0.0, 0.0, 0.0, 1.0),
    "normal": (0.0, 0.0, 0.0, 0.0),
    "texcoord": (0.0, 0.0, 0.0, 1.0),
}


class VertexAttrib:
    """Holds the three four-component attributes of a single vertex."""

    def __init__(self) -> None:
        self._data: dict[str, list[float]] = {
            name: list(default) for name, default in _DEFAULTS.items()
        }

    def has_data(self, name: str) -> bool:
        """Whether this vertex carries the named attribute."""
        return name in self._data

    def get_data(self, name: str) -> list[float]:
        """Return the four components of the named attribute."""
        if name not in self._data:
            raise ValueError(f"No attribute: {name} found!")
        return list(self._data[name])

    def set_data(self, name: str, data: Sequence[float]) -> None:
        """Set the leading components of an attribute; the rest take defaults."""
        if name not in self._data:
            raise ValueError(f"Attribute: {name} unsupported!")
        if not 1 <= len(data) <= 4:
            raise ValueError(f"Too much data for attribute: {name}")
        values = list(_DEFAULTS[name])
        values[: len(data)] = (float(v) for v in data)
        self._data[name] = values

    def all_attributes(self) -> list[str]:
        """Names of every attribute, in a fixed order."""
        return list(_DEFAULTS)