"""The market grid and the player who walks it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import MAP_HEIGHT, MAP_WIDTH, STARTING_MONEY
from .models import GameState
from .resources import Inventory

log = logging.getLogger(__name__)

DEFAULT_MAP_FILE = "LevelLayouts/market1.txt"
PLAYER_START = "P"
FLOOR = "."
WALKABLE = frozenset(".,~'")

_ZONES = {".": 0, "P": 0, ",": 1, "~": 2, "'": 3, " ": 4}


def zone_from_char(char: str) -> int:
    """Return the zone a map character belongs to, or -1 if it has none."""
    return _ZONES.get(char, -1)


@dataclass
class Tile:
    """One cell of the market grid."""

    character: str = " "
    zone: int = -1
    shop_id: int = -1


class Player:
    """The trader: a position on the grid, an inventory and the current zone."""

    def __init__(self, starting_money: int = STARTING_MONEY) -> None:
        self.position: tuple[int, int] = (0, 0)
        self.inventory = Inventory(money=starting_money)
        self.current_zone = 0

    def move(self, dx: int, dy: int, map_manager: MapManager, game_state: GameState) -> bool:
        """Step by (dx, dy) if the target is walkable; crossing zones costs one AP.

        Returns True if the player moved.
        """
        x, y = self.position
        new_x, new_y = x + dx, y + dy
        if not (0 <= new_x < MAP_WIDTH and 0 <= new_y < MAP_HEIGHT):
            return False
        if not map_manager.is_walkable(map_manager.get_char_at(new_x, new_y)):
            return False

        new_zone = map_manager.get_zone_at(new_x, new_y)
        if new_zone != self.current_zone:
            if game_state.action_points <= 0:
                log.warning("Not enough AP to cross zones!")
                return False
            game_state.action_points -= 1
            self.current_zone = new_zone

        self.position = (new_x, new_y)
        return True


class MapManager:
    """The market grid of tiles, loaded from a text layout."""

    def __init__(self) -> None:
        self.tiles: list[list[Tile]] = [
            [Tile() for _ in range(MAP_WIDTH)] for _ in range(MAP_HEIGHT)
        ]

    def load_map(self, player: Player, path: str | Path = DEFAULT_MAP_FILE) -> None:
        """Read a layout file into the grid and place the player at its ``P``.

        Raises OSError if the file cannot be read.
        """
        text = Path(path).read_text(encoding="latin-1")
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        for y, line in enumerate(lines[:MAP_HEIGHT]):
            if len(line) < MAP_WIDTH:
                log.warning("line %d is too short", y)
            for x, char in enumerate(line[:MAP_WIDTH]):
                tile = self.tiles[y][x]
                tile.zone = zone_from_char(char)
                tile.shop_id = -1

                if char == PLAYER_START:
                    player.position = (x, y)
                    player.current_zone = tile.zone
                    tile.character = FLOOR
                elif "1" <= char <= "5":
                    tile.shop_id = ord(char) - ord("1")
                    tile.character = char
                elif char in WALKABLE:
                    tile.character = FLOOR
                else:
                    tile.character = char

    def _tile(self, x: int, y: int) -> Tile:
        if not (0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.tiles[y][x]

    def get_zone_at(self, x: int, y: int) -> int:
        """Return the zone of the tile at column x, row y."""
        return self._tile(x, y).zone

    def get_char_at(self, x: int, y: int) -> str:
        """Return the character of the tile at column x, row y."""
        return self._tile(x, y).character

    def is_walkable(self, char: str) -> bool:
        """Whether a map character can be stepped on (shops cannot)."""
        return char in WALKABLE