"""Rush Hour puzzle solver with UCS, greedy best-first and A* search."""

__version__ = "0.1.0"