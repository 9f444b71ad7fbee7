"""The interactive buy/sell menu shown inside a shop."""

from __future__ import annotations

import math
import sys
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from .config import BASE_PRICES, MAP_HEIGHT, MAP_WIDTH, PRIORITY_MULTIPLIERS, RESOURCE_NAMES
from .console import set_cursor
from .models import GameMode, GameState, Shop
from .resources import ResourceType

if TYPE_CHECKING:
    from .market import Player

MENU_X = MAP_WIDTH + 2
MENU_WIDTH = 40

_ENTER = ("\r", "\n")
_MAIN_OPTIONS = ("Buy", "Sell", "Leave")
_BUY, _SELL, _LEAVE = range(3)

MSG_LEFT = "Left shop."
MSG_NO_AP = "Not enough AP for transaction."
MSG_BAD_AMOUNT = "Amount must be >= 1."
MSG_NO_STOCK = "Shop doesn't have enough stock."
MSG_NO_MONEY = "You don't have enough money."
MSG_NO_SELECTION = "No resource selected."
MSG_NO_RESOURCE = "You don't have enough of that resource."
MSG_SHOP_BROKE = "Shop can't afford that many right now."
MSG_NOTHING_WANTED = "Shop will not buy any resource."


def unit_price_sell_to_player(resource_type) -> int:
    """Price per unit a shop charges the player."""
    return BASE_PRICES[ResourceType(resource_type)]


def unit_price_buy_from_player(resource_type, priority: int) -> int:
    """Price per unit a shop pays the player, scaled by its priority; at least 1."""
    price = BASE_PRICES[ResourceType(resource_type)] * PRIORITY_MULTIPLIERS[priority]
    return max(1, math.floor(price + 0.5))


def _pad(text: str) -> str:
    return text[:MENU_WIDTH].ljust(MENU_WIDTH)


class UIMode(Enum):
    """Which page of the shop menu is open."""

    MAIN_MENU = "main"
    BUY_MENU = "buy"
    SELL_MENU = "sell"


class ShopUI:
    """Menu state for the shop currently visited, and the trades it performs."""

    def __init__(self) -> None:
        self.mode = UIMode.MAIN_MENU
        self.main_index = _BUY
        self.buy_amount = 1
        self.sell_index = 0
        self.sell_amount = 1
        self.sell_resources: list[ResourceType] = []
        self.status_message = ""

    def _build_sell_list(self, shop: Shop) -> None:
        self.sell_resources = [r for r in ResourceType if r != shop.main_resource]
        self.sell_index = 0
        self.sell_amount = 1

    def enter_shop(self, shop: Shop | None) -> None:
        """Reset the menu for a fresh visit to ``shop``."""
        self.mode = UIMode.MAIN_MENU
        self.main_index = _BUY
        self.buy_amount = 1
        self.sell_index = 0
        self.sell_amount = 1
        self.status_message = ""
        self.sell_resources = []
        if shop is not None:
            self._build_sell_list(shop)

    def menu_lines(self, shop: Shop | None, player: Player) -> list[str]:
        """Return the menu text, one entry per screen row."""
        lines = [
            "================ SHOP ================",
            f"Name: {shop.name}" if shop is not None else "Name: (none)",
            "",
            f"Player Money: {player.inventory.money}",
            "",
        ]

        if self.mode is UIMode.MAIN_MENU:
            lines += [
                (">> " if index == self.main_index else "   ") + option
                for index, option in enumerate(_MAIN_OPTIONS)
            ]
            lines += ["", "Use W/S to move, Enter to select, Q to leave"]
        elif self.mode is UIMode.BUY_MENU:
            resource = shop.main_resource
            unit = unit_price_sell_to_player(resource)
            stock = shop.inventory.get_amount(resource)
            lines += [
                f"Buy {RESOURCE_NAMES[resource]}",
                f"Unit: {unit}  ShopStock: {stock}",
                "",
                f"Amount: {self.buy_amount}   (A/D to change)",
                f"Total: {unit * self.buy_amount}",
                "",
                "Enter to purchase, Q=Back",
            ]
        else:
            lines.append("Sell (choose resource):")
            for index, resource in enumerate(self.sell_resources):
                prefix = ">> " if index == self.sell_index else "   "
                unit = unit_price_buy_from_player(resource, shop.priorities[resource])
                have = player.inventory.get_amount(resource)
                max_sell = min(have, shop.inventory.money // unit) if unit > 0 else 0
                lines.append(
                    f"{prefix}{RESOURCE_NAMES[resource]}  Unit: {unit}  You: {have}"
                    f"  MaxSell: {max_sell}  CurrAmount: {self.sell_amount}"
                )
            lines += ["", "W/S up/down  A/D change amount  Enter sell  Q=Back"]

        lines += [
            "",
            "---------------------------------------",
            f"Status: {self.status_message}",
            "",
        ]
        return lines

    def render(self, shop: Shop | None, player: Player, stream: TextIO | None = None) -> None:
        """Clear the menu column to the right of the map and draw the menu there."""
        out = sys.stdout if stream is None else stream
        blank = " " * MENU_WIDTH
        for y in range(MAP_HEIGHT):
            set_cursor(MENU_X, y, out)
            out.write(blank)
        for row, text in enumerate(self.menu_lines(shop, player)):
            set_cursor(MENU_X, row, out)
            out.write(_pad(text))
        out.flush()

    def _leave(self, state: GameState) -> None:
        state.mode = GameMode.MARKET
        state.current_shop = None
        self.status_message = MSG_LEFT

    def _try_buy(self, shop: Shop, player: Player, state: GameState) -> None:
        resource = shop.main_resource
        total = unit_price_sell_to_player(resource) * self.buy_amount

        if state.action_points <= 0:
            self.status_message = MSG_NO_AP
        elif self.buy_amount <= 0:
            self.status_message = MSG_BAD_AMOUNT
        elif shop.inventory.get_amount(resource) < self.buy_amount:
            self.status_message = MSG_NO_STOCK
        elif player.inventory.money < total:
            self.status_message = MSG_NO_MONEY
        else:
            player.inventory.money -= total
            shop.inventory.money += total
            shop.inventory.remove(resource, self.buy_amount)
            player.inventory.add(resource, self.buy_amount)
            state.action_points -= 1
            self.status_message = f"Bought {self.buy_amount} {RESOURCE_NAMES[resource]}."

    def _try_sell(self, shop: Shop, player: Player, state: GameState) -> None:
        if not 0 <= self.sell_index < len(self.sell_resources):
            self.status_message = MSG_NO_SELECTION
            return
        resource = self.sell_resources[self.sell_index]
        unit = unit_price_buy_from_player(resource, shop.priorities[resource])
        total = unit * self.sell_amount

        if state.action_points <= 0:
            self.status_message = MSG_NO_AP
        elif self.sell_amount <= 0:
            self.status_message = MSG_BAD_AMOUNT
        elif player.inventory.get_amount(resource) < self.sell_amount:
            self.status_message = MSG_NO_RESOURCE
        elif shop.inventory.money < total:
            self.status_message = MSG_SHOP_BROKE
        else:
            player.inventory.remove(resource, self.sell_amount)
            player.inventory.money += total
            shop.inventory.money -= total
            shop.inventory.add(resource, self.sell_amount)
            state.action_points -= 1
            self.status_message = f"Sold {self.sell_amount} {RESOURCE_NAMES[resource]}."

    def handle_input(self, key: str, shop: Shop | None, player: Player, state: GameState) -> None:
        """Apply one key press to the menu; drawing is left to ``render``."""
        if "A" <= key <= "Z":
            key = key.lower()

        if self.mode is UIMode.MAIN_MENU:
            self._handle_main(key, shop, state)
        elif self.mode is UIMode.BUY_MENU:
            self._handle_buy(key, shop, player, state)
        else:
            self._handle_sell(key, shop, player, state)

    def _handle_main(self, key: str, shop: Shop | None, state: GameState) -> None:
        count = len(_MAIN_OPTIONS)
        if key == "w":
            self.main_index = (self.main_index + count - 1) % count
        elif key == "s":
            self.main_index = (self.main_index + 1) % count
        elif key in _ENTER:
            if self.main_index == _BUY:
                self.mode = UIMode.BUY_MENU
                self.buy_amount = 1
                self.status_message = ""
            elif self.main_index == _SELL:
                self.mode = UIMode.SELL_MENU
                self._build_sell_list(shop)
                self.status_message = ""
            else:
                self._leave(state)
        elif key == "q":
            self._leave(state)

    def _handle_buy(self, key: str, shop: Shop, player: Player, state: GameState) -> None:
        resource = shop.main_resource
        if key == "a":
            self.buy_amount = max(1, self.buy_amount - 1)
        elif key == "d":
            unit = unit_price_sell_to_player(resource)
            money_max = player.inventory.money // (unit or 1)
            stock = shop.inventory.get_amount(resource)
            effective_max = max(1, min(stock, money_max))
            self.buy_amount = min(effective_max, self.buy_amount + 1)
        elif key in _ENTER:
            self._try_buy(shop, player, state)
        elif key == "q":
            self.mode = UIMode.MAIN_MENU
            self.status_message = ""

    def _handle_sell(self, key: str, shop: Shop, player: Player, state: GameState) -> None:
        if not self.sell_resources:
            self.status_message = MSG_NOTHING_WANTED
            return
        resource = self.sell_resources[self.sell_index]
        unit = unit_price_buy_from_player(resource, shop.priorities[resource])

        if key == "w":
            self.sell_index = max(0, self.sell_index - 1)
            self.sell_amount = 1
        elif key == "s":
            self.sell_index = min(len(self.sell_resources) - 1, self.sell_index + 1)
            self.sell_amount = 1
        elif key == "a":
            self.sell_amount = max(1, self.sell_amount - 1)
        elif key == "d":
            have = player.inventory.get_amount(resource)
            money_max = have if unit == 0 else shop.inventory.money // unit
            effective_max = max(1, min(have, money_max))
            self.sell_amount = min(effective_max, self.sell_amount + 1)
        elif key in _ENTER:
            self._try_sell(shop, player, state)
        elif key == "q":
            self.mode = UIMode.MAIN_MENU
            self.status_message = ""