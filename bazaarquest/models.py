"""Shops and overall game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .config import STARTING_ACTION_POINTS, STARTING_MONEY
from .resources import Inventory, ResourceType


class GameMode(Enum):
    """Which screen the game is showing."""

    MARKET = "market"
    SHOP = "shop"
    TRANSITION = "transition"


def _zero_priorities() -> list[int]:
    return [0] * len(ResourceType)


@dataclass
class Shop:
    """A merchant: sells its main resource and buys others by priority (0 to 4)."""

    name: str = ""
    inventory: Inventory = field(default_factory=Inventory)
    main_resource: ResourceType = ResourceType.SPICES
    zone: int = -1
    shop_id: int = -1
    position: tuple[int, int] = (-1, -1)
    priorities: list[int] = field(default_factory=_zero_priorities)


@dataclass
class GameState:
    """Calendar, action points, mode and the shop currently visited."""

    current_day: int = 1
    current_week: int = 1
    total_money_earned: int = 0
    player_money: int = STARTING_MONEY
    action_points: int = STARTING_ACTION_POINTS
    mode: GameMode = GameMode.MARKET
    current_shop: Shop | None = None