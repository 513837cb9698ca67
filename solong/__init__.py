"""Loading and validation of .ber maps for a tile-based collect-and-escape puzzle game."""

__version__ = "0.1.0"