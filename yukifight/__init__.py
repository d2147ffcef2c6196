"""Game logic for a small top-down snowman action game, with a pygame window for its scene flow."""

__version__ = "0.1.0"