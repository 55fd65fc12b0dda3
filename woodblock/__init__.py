"""
Procedural wood-block relief patterns.

Maps a pattern id and a board size onto a grid of discrete block heights.
"""

__version__ = "0.1.0"
