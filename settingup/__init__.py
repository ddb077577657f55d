"""Find and mark the largest empty square in a grid of obstacles, with small integer and string helpers."""

__version__ = "0.1.0"