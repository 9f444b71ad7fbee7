"""A terminal trading game set in a zoned market: map, merchants, trading menu and game loop."""

__version__ = "0.1.0"