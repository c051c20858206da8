"""Game logic for a side-scrolling action game: stage objects, attacks, items, event conditions, input recording and save data."""

__version__ = "0.1.0"