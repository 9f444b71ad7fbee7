"""Game-wide tuning constants."""

STARTING_MONEY = 300
STARTING_ACTION_POINTS = 15
WEEKLY_QUOTA = 500
WEEKLY_QUOTA_INCREMENT = 250

SHOP_MIN_MONEY = 100
SHOP_MAX_MONEY = 250

SHOP_MIN_RESOURCE = 3
SHOP_MAX_RESOURCE = 7

# Sell-price multipliers by shop priority: index 0 is lowest, 4 is highest.
PRIORITY_MULTIPLIERS = (0.25, 0.5, 0.75, 1.0, 1.25)

# Indexed in the same order as ResourceType.
RESOURCE_NAMES = ("Spices", "Textiles", "Jewelry", "Minerals", "Medicine")

# Base unit price of each resource, indexed in ResourceType order.
BASE_PRICES = (4, 4, 16, 8, 12)

MAP_WIDTH = 62
MAP_HEIGHT = 20