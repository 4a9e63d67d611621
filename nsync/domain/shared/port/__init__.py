"""Shared port base for collaborator interfaces."""

from typing import Protocol


class Port(Protocol):
    """Marker base for interfaces the domain depends on and infrastructure implements."""


__all__ = ["Port"]
