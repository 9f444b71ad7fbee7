"""Drawing the market map, the shop screen and the status lines."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from .config import MAP_HEIGHT, MAP_WIDTH
from .console import set_color, set_cursor
from .market import WALKABLE
from .models import GameMode, GameState, Shop

if TYPE_CHECKING:
    from .market import MapManager, Player

PLAYER_GLYPH = "@"
PLAYER_COLOR = 14
DEFAULT_COLOR = 7
HUD_X = 65

# Console colour attribute for each zone; unknown zones use the default colour.
ZONE_COLORS = {0: 8, 1: 10, 2: 11, 3: 13, 4: 12}

SHOPKEEPER_ART = (
    "      ______________________________      ",
    "     /                              \\     ",
    "    /   [ Shop of Fine Wares ]       \\    ",
    "   |   ____________________________   |   ",
    "   |  |                            |  |   ",
    "   |  |    (\\      /)  (\\      /)  |  |   ",
    "   |  |     \\`.__.' /   \\`.__.' /   |  |   ",
    "   |  |      `-..-'       `-..-'    |  |   ",
    "   |  |                            |  |   ",
    "   |  |   The Keeper awaits...     |  |   ",
    "   |  |____________________________|  |   ",
    "   |____________________________________|  ",
    "                                           ",
    "        [    COUNTER    ]                  ",
    "       ______________________              ",
    "      |                      |             ",
    "      |   Welcome, traveler  |             ",
    "      |______________________|             ",
)


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def draw_map(map_manager: MapManager, player: Player, stream: TextIO | None = None) -> None:
    """Draw the market grid coloured by zone, with the player on top."""
    out = _out(stream)
    player_x, player_y = player.position
    for y, row in enumerate(map_manager.tiles[:MAP_HEIGHT]):
        for x, tile in enumerate(row[:MAP_WIDTH]):
            set_cursor(x, y, out)
            if (x, y) == (player_x, player_y):
                set_color(PLAYER_COLOR, out)
                out.write(PLAYER_GLYPH)
                continue
            set_color(ZONE_COLORS.get(tile.zone, DEFAULT_COLOR), out)
            out.write("." if tile.character in WALKABLE else tile.character)
    set_color(DEFAULT_COLOR, out)


def draw_shop(shop: Shop | None, player: Player, stream: TextIO | None = None) -> None:
    """Blank the map area and draw the shopkeeper art centred in it.

    The menu column on the right is left to the shop menu to draw.
    """
    out = _out(stream)
    blank = " " * MAP_WIDTH
    for y in range(MAP_HEIGHT):
        set_cursor(0, y, out)
        out.write(blank)

    art_height = len(SHOPKEEPER_ART)
    art_width = max(len(line) for line in SHOPKEEPER_ART)
    start_y = max(0, (MAP_HEIGHT - art_height) // 2)
    start_x = max(0, (MAP_WIDTH - art_width) // 2)
    room = max(0, MAP_WIDTH - start_x)

    set_color(DEFAULT_COLOR, out)
    for offset, line in enumerate(SHOPKEEPER_ART[: max(0, MAP_HEIGHT - start_y)]):
        set_cursor(start_x, start_y + offset, out)
        out.write(line[:room])
    set_color(DEFAULT_COLOR, out)


def draw_hud(state: GameState, player: Player, stream: TextIO | None = None) -> None:
    """Draw week, day, action points and zone in a column beside the map."""
    out = _out(stream)
    entries = (
        f"WEEK: {state.current_week}",
        f"DAY: {state.current_day}",
        f"AP: {state.action_points}",
        f"ZONE: {player.current_zone}",
    )
    for row, text in enumerate(entries):
        set_cursor(HUD_X, row, out)
        out.write(text)


def draw_status_bar(state: GameState, player: Player, stream: TextIO | None = None) -> None:
    """Draw the two status lines below the map."""
    out = _out(stream)
    hud_y = MAP_HEIGHT + 1
    set_cursor(0, hud_y, out)
    out.write(
        f"WEEK: {state.current_week}  "
        f"DAY: {state.current_day}  "
        f"AP: {state.action_points}  "
        f"ZONE: {player.current_zone}  "
        f"MONEY: {player.inventory.money}        "
    )
    set_cursor(0, hud_y + 1, out)
    mode = "Market" if state.mode is GameMode.MARKET else "Shop"
    out.write(f"MODE: {mode}        ")