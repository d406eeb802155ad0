"""Tick-based simulation core for a top-down 2D tank battle game: world, units, players, obstacles, particles and bullets."""

__version__ = "0.1.0"