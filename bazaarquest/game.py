"""Keyboard handling and the main game loop."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from typing import TextIO

from .config import MAP_HEIGHT, MAP_WIDTH, STARTING_ACTION_POINTS, STARTING_MONEY
from .market import DEFAULT_MAP_FILE, MapManager, Player
from .models import GameMode, GameState
from .rendering import draw_map, draw_shop, draw_status_bar
from .shop_ui import ShopUI
from .shops import DEFAULT_SHOP_FILE, ShopManager

if sys.platform == "win32":
    import msvcrt
else:
    import select
    import termios
    import tty

FRAME_SECONDS = 0.05

_MOVES = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}
_INTERACT = "e"
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def adjacent_shop_id(player: Player, map_manager: MapManager) -> int | None:
    """Return the id of a shop entrance next to the player, or None."""
    x, y = player.position
    for dx, dy in _NEIGHBOURS:
        nx, ny = x + dx, y + dy
        if not (0 <= nx < MAP_WIDTH and 0 <= ny < MAP_HEIGHT):
            continue
        shop_id = map_manager.tiles[ny][nx].shop_id
        if shop_id >= 0:
            return shop_id
    return None


def handle_input(
    key: str,
    player: Player,
    map_manager: MapManager,
    state: GameState,
    shop_manager: ShopManager,
    shop_ui: ShopUI,
) -> None:
    """Apply one key press: walk or enter a shop in the market, else drive the shop menu."""
    if state.mode is GameMode.MARKET:
        if key in _MOVES:
            dx, dy = _MOVES[key]
            player.move(dx, dy, map_manager, state)
        elif key == _INTERACT:
            shop_id = adjacent_shop_id(player, map_manager)
            if shop_id is None:
                return
            shop = shop_manager.get_shop_by_id(shop_id)
            if shop is not None:
                state.mode = GameMode.SHOP
                state.current_shop = shop
                shop_ui.enter_shop(shop)
    elif state.mode is GameMode.SHOP:
        shop_ui.handle_input(key, state.current_shop, player, state)


class KeyReader:
    """Non-blocking reader of single key presses from the terminal.

    Use as a context manager so the terminal is put into and taken out of
    character-at-a-time mode.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = sys.stdin if stream is None else stream
        self._saved = None

    def __enter__(self) -> KeyReader:
        if sys.platform != "win32" and self._stream.isatty():
            fd = self._stream.fileno()
            self._saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved is not None and sys.platform != "win32":
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None

    def poll(self) -> str | None:
        """Return a pending key, or None if none is waiting."""
        if sys.platform == "win32":
            if not msvcrt.kbhit():
                return None
            return msvcrt.getwch()
        ready, _, _ = select.select([self._stream], [], [], 0)
        if not ready:
            return None
        data = os.read(self._stream.fileno(), 1)
        return data.decode("latin-1") if data else None


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bazaarquest", description="Trade your way around a market.")
    parser.add_argument("--map", default=DEFAULT_MAP_FILE, help="market layout file")
    parser.add_argument("--shops", default=DEFAULT_SHOP_FILE, help="shop template file")
    parser.add_argument("--seed", type=int, default=None, help="seed for shop selection")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the game until interrupted."""
    args = _parse_args(argv)
    state = GameState(
        current_day=1,
        current_week=1,
        total_money_earned=0,
        player_money=STARTING_MONEY,
        action_points=STARTING_ACTION_POINTS,
        mode=GameMode.MARKET,
    )
    player = Player(STARTING_MONEY)
    map_manager = MapManager()
    shop_manager = ShopManager()
    shop_ui = ShopUI()

    shop_manager.load_shops(args.shops, random.Random(args.seed))
    try:
        map_manager.load_map(player, args.map)
    except OSError:
        print("Failed to load map file.", file=sys.stderr)
        return 1

    out = sys.stdout
    try:
        with KeyReader() as reader:
            while True:
                if state.mode is GameMode.MARKET:
                    draw_map(map_manager, player, out)
                else:
                    draw_shop(state.current_shop, player, out)
                    shop_ui.render(state.current_shop, player, out)
                draw_status_bar(state, player, out)
                out.flush()

                key = reader.poll()
                if key:
                    handle_input(key, player, map_manager, state, shop_manager, shop_ui)
                time.sleep(FRAME_SECONDS)
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())