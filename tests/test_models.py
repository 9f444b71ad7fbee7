from bazaarquest.config import STARTING_ACTION_POINTS, STARTING_MONEY
from bazaarquest.models import GameMode, GameState, Shop
from bazaarquest.resources import ResourceType


def test_game_state_defaults():
    state = GameState()
    assert state.current_day == 1
    assert state.current_week == 1
    assert state.total_money_earned == 0
    assert state.player_money == STARTING_MONEY
    assert state.action_points == STARTING_ACTION_POINTS
    assert state.mode is GameMode.MARKET
    assert state.current_shop is None


def test_game_state_holds_shop():
    shop = Shop(name="Stall")
    state = GameState(mode=GameMode.SHOP, current_shop=shop)
    assert state.current_shop is shop
    assert state.mode is GameMode.SHOP


def test_shop_defaults():
    shop = Shop()
    assert shop.main_resource is ResourceType.SPICES
    assert shop.zone == -1
    assert shop.shop_id == -1
    assert shop.position == (-1, -1)
    assert shop.priorities == [0] * len(ResourceType)
    assert shop.inventory.money == 0


def test_shops_do_not_share_state():
    first, second = Shop(), Shop()
    first.priorities[2] = 4
    first.inventory.add(ResourceType.JEWELRY, 3)
    assert second.priorities[2] == 0
    assert second.inventory.get_amount(ResourceType.JEWELRY) == 0


def test_game_modes():
    state = GameState(mode=GameMode.TRANSITION)
    assert state.mode is GameMode.TRANSITION
    assert {mode.name for mode in GameMode} == {"MARKET", "SHOP", "TRANSITION"}