# bazaarquest

A small terminal trading game. You walk around a market made of coloured
zones, step up to merchants, buy the goods they sell and sell them the goods
they want. You have a limited number of action points (AP): crossing from one
zone into another costs one AP, and so does every completed purchase or sale.

## Installing

```
pip install .
```

This installs the `bazaarquest` command.

## Playing

Run the game from a directory that holds the game data:

```
bazaarquest
```

By default it reads two files relative to the working directory:

- `LevelLayouts/market1.txt` – the market layout
- `ShopTemplates/shops.txt` – the merchant templates

Options:

- `--map PATH` – use another market layout file
- `--shops PATH` – use another shop template file
- `--seed N` – seed the random choice of merchants, for a repeatable game

If the layout file cannot be read, the game prints `Failed to load map file.`
and exits with status 1. If the shop file cannot be read, the game still
starts, but there are no merchants to visit. Press Ctrl+C to quit.

The screen is drawn with ANSI escape sequences, so a terminal that
understands them is needed. Keys are read one at a time without waiting for
Enter.

### The market

The map is 62 columns by 20 rows. Each character is a tile:

| Char  | Meaning                                  |
|-------|------------------------------------------|
| `.`   | walkable, zone 0                         |
| `,`   | walkable, zone 1                         |
| `~`   | walkable, zone 2                         |
| `'`   | walkable, zone 3                         |
| `P`   | the player's starting tile (zone 0)      |
| `1`–`5` | a merchant's stall (shop 0 to 4)       |
| space | zone 4, not walkable                     |
| anything else | a wall or decoration             |

Zones are shown in different colours; the player is drawn as `@`. Below the
map a status bar shows the week, day, AP, current zone, money and mode.

You start with 300 money and 15 AP. Moving into a tile of another zone with
no AP left is refused.

Controls in the market (lower-case keys):

- `w` `a` `s` `d` – move
- `e` – enter a stall that is directly next to you

### Inside a shop

- main menu: `W`/`S` to choose Buy, Sell or Leave, Enter to select, `Q` to leave
- buying: `A`/`D` to change the amount, Enter to purchase, `Q` to go back
- selling: `W`/`S` to pick a resource, `A`/`D` to change the amount,
  Enter to sell, `Q` to go back

A merchant sells one resource at its base price. It buys every other resource
at the base price scaled by how much it wants it (priority 0 to 4 gives
×0.25, ×0.5, ×0.75, ×1.0 or ×1.25, rounded half up, never below 1). A trade
fails with a status message if you have no AP, the merchant lacks stock or
money, or you lack money or goods.

Base prices: Spices 4, Textiles 4, Jewelry 16, Minerals 8, Medicine 12.

### Shop templates

`shops.txt` holds blocks separated by a line containing only `---`:

```
Spice Merchant
ResourceSold: Spices
Gold: 200
Stock: 5
Priorities: 0 2 3 1 4
---
Weaver
ResourceSold: Textiles
Gold: 150
Stock: 6
Priorities: 1 0 2 4 3
```

The first line is the shop's name. An unknown resource name counts as
Spices. `Stock` only counts if it comes after `ResourceSold`. Priorities are
listed in the order Spices, Textiles, Jewelry, Minerals, Medicine; missing
ones are 0 and all are clamped to 0–4. Blocks with fewer than five non-empty
lines are skipped. Up to five shops are picked at random each game.

## What the game does not do

The week and day counters never advance, the weekly quota values in
`bazaarquest.config` are not enforced, and AP are never restored: once they
are spent you can no longer trade or cross zones. There is no saving or
loading of a game in progress.

## Using it as a library

The pieces of the game can be used on their own:

- `bazaarquest.resources` – `ResourceType`, `Inventory`,
  `string_to_resource`, `resource_to_string`
- `bazaarquest.models` – `Shop`, `GameState`, `GameMode`
- `bazaarquest.shops` – `trim`, `parse_templates`, `load_random_templates`,
  `ShopManager`
- `bazaarquest.market` – `MapManager`, `Player`, `Tile`, `zone_from_char`
- `bazaarquest.shop_ui` – `ShopUI`, `UIMode`, `unit_price_sell_to_player`,
  `unit_price_buy_from_player`
- `bazaarquest.rendering` – `draw_map`, `draw_shop`, `draw_hud`,
  `draw_status_bar`
- `bazaarquest.game` – `handle_input`, `adjacent_shop_id`, `KeyReader`, `main`

For example:

```python
import random
from bazaarquest.shops import ShopManager, parse_templates
from bazaarquest.resources import Inventory, ResourceType

shops = parse_templates("Spice Merchant\nResourceSold: Spices\nGold: 200\nStock: 5\nPriorities: 0 2 3 1 4\n")

manager = ShopManager()
manager.load_shops("ShopTemplates/shops.txt", random.Random(1))
shop = manager.get_shop_by_id(0)  # None if there is no such shop

bag = Inventory()
bag.add(ResourceType.SPICES, 3)
```

`ShopUI.menu_lines` returns the shop menu as a list of strings, so the menu
can be inspected without a terminal; the drawing functions take an optional
text stream and write to standard output by default.

## Running the tests

```
pip install ".[test]"
pytest
```