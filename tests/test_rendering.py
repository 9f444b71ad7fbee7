import io
import re

from bazaarquest.config import MAP_HEIGHT, MAP_WIDTH
from bazaarquest.console import set_color
from bazaarquest.market import MapManager, Player, Tile
from bazaarquest.models import GameMode, GameState, Shop
from bazaarquest.rendering import (
    HUD_X,
    SHOPKEEPER_ART,
    draw_hud,
    draw_map,
    draw_shop,
    draw_status_bar,
)

_ESC = re.compile(r"\x1b\[(\d+);(\d+)H|\x1b\[[0-9;]*m")


def _screen(text, width=200, height=30):
    grid = [[" "] * width for _ in range(height)]
    row = col = 0
    pos = 0

    def put(chunk):
        nonlocal col
        for ch in chunk:
            grid[row][col] = ch
            col += 1

    for match in _ESC.finditer(text):
        put(text[pos:match.start()])
        if match.group(1):
            row = int(match.group(1)) - 1
            col = int(match.group(2)) - 1
        pos = match.end()
    put(text[pos:])
    return ["".join(r).rstrip() for r in grid]


def _color(code):
    buf = io.StringIO()
    set_color(code, buf)
    return buf.getvalue()


def _market():
    manager = MapManager()
    for row in manager.tiles:
        for tile in row:
            tile.character = "#"
            tile.zone = -1
    manager.tiles[2][3] = Tile(character=",", zone=1)
    manager.tiles[2][4] = Tile(character="1", zone=-1, shop_id=0)
    manager.tiles[2][5] = Tile(character="~", zone=2)
    return manager


def test_draw_map_places_player_and_normalises_walkables():
    manager = _market()
    player = Player()
    player.position = (2, 2)
    buf = io.StringIO()
    draw_map(manager, player, buf)
    rows = _screen(buf.getvalue())
    assert rows[2][2] == "@"
    assert rows[2][3] == "."
    assert rows[2][4] == "1"
    assert rows[2][5] == "."
    assert rows[0][:MAP_WIDTH] == "#" * MAP_WIDTH
    assert rows[MAP_HEIGHT] == ""


def test_draw_map_colours_player_and_resets():
    manager = _market()
    player = Player()
    player.position = (2, 2)
    buf = io.StringIO()
    draw_map(manager, player, buf)
    text = buf.getvalue()
    assert _color(14) + "@" in text
    assert _color(10) + "." in text
    assert text.endswith(_color(7))


def test_draw_map_blank_tiles_use_default_colour():
    manager = MapManager()
    player = Player()
    player.position = (0, 0)
    buf = io.StringIO()
    draw_map(manager, player, buf)
    text = buf.getvalue()
    assert _color(7) + " " in text
    assert _screen(text)[0] == "@"


def test_draw_shop_clears_map_and_shows_art():
    buf = io.StringIO()
    buf.write("\x1b[1;1H" + "X" * MAP_WIDTH)
    draw_shop(Shop(name="Spice Stall"), Player(), buf)
    rows = _screen(buf.getvalue())
    assert "X" not in "".join(rows)
    joined = "\n".join(rows)
    for line in SHOPKEEPER_ART:
        if line.strip():
            assert line.strip() in joined
    assert all(len(r) <= MAP_WIDTH for r in rows[:MAP_HEIGHT])


def test_draw_shop_keeps_art_order():
    buf = io.StringIO()
    draw_shop(None, Player(), buf)
    rows = _screen(buf.getvalue())
    title = next(i for i, r in enumerate(rows) if "[ Shop of Fine Wares ]" in r)
    keeper = next(i for i, r in enumerate(rows) if "The Keeper awaits..." in r)
    welcome = next(i for i, r in enumerate(rows) if "Welcome, traveler" in r)
    assert title < keeper < welcome
    assert welcome < MAP_HEIGHT


def test_draw_hud_column():
    state = GameState(current_week=2, current_day=4, action_points=7)
    player = Player()
    player.current_zone = 3
    buf = io.StringIO()
    draw_hud(state, player, buf)
    rows = _screen(buf.getvalue())
    assert rows[0][HUD_X:] == "WEEK: 2"
    assert rows[1][HUD_X:] == "DAY: 4"
    assert rows[2][HUD_X:] == "AP: 7"
    assert rows[3][HUD_X:] == "ZONE: 3"


def test_draw_status_bar_market():
    state = GameState(current_week=2, current_day=3, action_points=9)
    player = Player(starting_money=300)
    player.current_zone = 1
    buf = io.StringIO()
    draw_status_bar(state, player, buf)
    rows = _screen(buf.getvalue())
    assert rows[MAP_HEIGHT + 1] == "WEEK: 2  DAY: 3  AP: 9  ZONE: 1  MONEY: 300"
    assert rows[MAP_HEIGHT + 2] == "MODE: Market"


def test_draw_status_bar_shop_mode_to_stdout(capsys):
    state = GameState(mode=GameMode.SHOP)
    draw_status_bar(state, Player())
    rows = _screen(capsys.readouterr().out)
    assert rows[MAP_HEIGHT + 2] == "MODE: Shop"