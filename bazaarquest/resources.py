"""Tradeable resource kinds and the inventories that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .config import RESOURCE_NAMES


class ResourceType(IntEnum):
    """A kind of tradeable good."""

    SPICES = 0
    TEXTILES = 1
    JEWELRY = 2
    MINERALS = 3
    MEDICINE = 4


def _coerce(resource_type) -> ResourceType | None:
    try:
        return ResourceType(resource_type)
    except (ValueError, TypeError):
        return None


def _empty_counts() -> dict[ResourceType, int]:
    return {resource: 0 for resource in ResourceType}


@dataclass
class Inventory:
    """Money plus a count for every resource type."""

    money: int = 0
    resource_counts: dict[ResourceType, int] = field(default_factory=_empty_counts)

    def add(self, resource_type, amount: int) -> None:
        """Add ``amount`` of a resource; non-positive amounts are ignored."""
        resource = _coerce(resource_type)
        if amount <= 0 or resource is None:
            return
        self.resource_counts[resource] += amount

    def remove(self, resource_type, amount: int) -> None:
        """Remove ``amount`` of a resource, never going below zero."""
        resource = _coerce(resource_type)
        if amount <= 0 or resource is None:
            return
        self.resource_counts[resource] = max(0, self.resource_counts[resource] - amount)

    def get_amount(self, resource_type) -> int:
        """Return how much of a resource is held; unknown types hold nothing."""
        resource = _coerce(resource_type)
        if resource is None:
            return 0
        return self.resource_counts[resource]


_BY_NAME = {name: ResourceType(index) for index, name in enumerate(RESOURCE_NAMES)}


def string_to_resource(text: str) -> ResourceType:
    """Map a resource name to its type, falling back to spices."""
    return _BY_NAME.get(text, ResourceType.SPICES)


def resource_to_string(resource_type) -> str:
    """Return the display name of a resource, or ``"Unknown"``."""
    resource = _coerce(resource_type)
    if resource is None:
        return "Unknown"
    return RESOURCE_NAMES[resource]