"""Loading shop templates and keeping the shops of a run."""

from __future__ import annotations

import logging
import random
import re
from pathlib import Path

from .models import Shop
from .resources import ResourceType, string_to_resource

log = logging.getLogger(__name__)

DEFAULT_SHOP_FILE = "ShopTemplates/shops.txt"
SHOPS_PER_RUN = 5

_SEPARATOR = "---"
_MIN_TEMPLATE_LINES = 5
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(" \t\r\n")


def _leading_int(text: str) -> int:
    """Parse a leading integer, ignoring trailing text; raise ValueError if none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_priorities(value: str) -> list[int]:
    priorities = []
    pos = 0
    failed = False
    for _ in ResourceType:
        priority = 0
        if not failed:
            match = _LEADING_INT.match(value, pos)
            if match is None:
                failed = True
            else:
                pos = match.end()
                priority = int(match.group(1))
                if not _INT_MIN <= priority <= _INT_MAX:
                    failed = True
        priorities.append(min(max(priority, 0), 4))
    return priorities


def _split_blocks(text: str) -> list[list[str]]:
    blocks: list[list[str]] = []
    block: list[str] = []
    for line in text.split("\n"):
        if trim(line) == _SEPARATOR:
            if any(trim(part) for part in block):
                blocks.append(block)
                block = []
        else:
            block.append(line)
    if any(trim(part) for part in block):
        blocks.append(block)
    return blocks


def _parse_block(raw_lines: list[str]) -> Shop | None:
    lines = [t for t in (trim(raw) for raw in raw_lines) if t]
    if len(lines) < _MIN_TEMPLATE_LINES:
        log.warning("skipping invalid shop template:\n%s", "\n".join(raw_lines))
        return None

    shop = Shop(name=lines[0])
    main_resource: ResourceType | None = None

    for line in lines[1:]:
        key, colon, value = line.partition(":")
        if not colon:
            continue
        key, value = trim(key), trim(value)

        if key == "ResourceSold":
            main_resource = string_to_resource(value)
            shop.main_resource = main_resource
        elif key == "Gold":
            try:
                shop.inventory.money = _leading_int(value)
            except ValueError:
                shop.inventory.money = 0
                log.warning("invalid money value %r for shop: %s", value, shop.name)
        elif key == "Stock":
            try:
                stock = _leading_int(value)
            except ValueError:
                log.warning("invalid Stock value %r for shop: %s", value, shop.name)
                continue
            if main_resource is None:
                log.warning("Stock found before ResourceSold in %r; stock ignored", shop.name)
            else:
                shop.inventory.add(main_resource, stock)
        elif key == "Priorities":
            shop.priorities = _parse_priorities(value)
        else:
            log.warning("unknown key %r in template for shop: %s", key, shop.name)
    return shop


def parse_templates(text: str) -> list[Shop]:
    """Parse every valid shop block in ``text``, numbering them in order."""
    shops = []
    for block in _split_blocks(text):
        shop = _parse_block(block)
        if shop is not None:
            shop.shop_id = len(shops)
            shops.append(shop)
    return shops


def load_random_templates(
    count: int, file_path: str | Path, rng: random.Random | None = None
) -> list[Shop]:
    """Read templates from a file and return up to ``count`` of them in random order.

    An unreadable file yields no shops.
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.error("failed to open %s: %s", file_path, exc)
        return []
    shops = parse_templates(text)
    (rng or random.Random()).shuffle(shops)
    return shops[: max(0, count)]


class ShopManager:
    """The shops taking part in the current run."""

    def __init__(self) -> None:
        self.shops: list[Shop] = []

    def load_shops(
        self, file_path: str | Path = DEFAULT_SHOP_FILE, rng: random.Random | None = None
    ) -> None:
        """Pick a random set of shops from the template file and number them."""
        self.shops = load_random_templates(SHOPS_PER_RUN, file_path, rng)
        for index, shop in enumerate(self.shops):
            shop.shop_id = index
            shop.zone = -1
            shop.position = (-1, -1)

    def get_shop_by_id(self, shop_id: int) -> Shop | None:
        """Return the shop with this id, or None."""
        return next((shop for shop in self.shops if shop.shop_id == shop_id), None)