"""Card Mover - Moves issue cards on GitHub Projects (classic) boards."""

__version__ = "0.1.0"
