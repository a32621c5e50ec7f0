"""Pieces of a Mars survival game: map, player, inventory, simulated board, screen and tile interactions."""

__version__ = "0.1.0"