from __future__ import annotations


class FogError(Exception):
    """Base class for fog-of-war errors."""


class InvalidPosition(FogError, IndexError):
    """A tile lies outside the grid. Positions are never clamped."""

    def __init__(self, pos, size) -> None:
        super().__init__(f"Position {pos} is outside grid of size {size}")
        self.pos = pos
        self.size = size


class UnknownUnitId(FogError, KeyError):
    """An event names a unit that the world does not know.

    The event stream and the unit collection have diverged upstream; callers
    should treat this as fatal.
    """

    def __init__(self, unit_id: str) -> None:
        super().__init__(unit_id)
        self.unit_id = unit_id

    def __str__(self) -> str:
        return f"Unknown unit id: {self.unit_id}"


class UnknownUnitType(FogError, KeyError):
    def __init__(self, type_id: str) -> None:
        super().__init__(type_id)
        self.type_id = type_id

    def __str__(self) -> str:
        return f"Unknown unit type: {self.type_id}"


class InvalidEvent(FogError, ValueError):
    """An event payload could not be decoded."""


class UnhandledEvent(FogError, TypeError):
    """An event has no visibility classification."""
