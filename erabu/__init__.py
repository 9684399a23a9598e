# Rev 0.1.0
"""erabu: a small project list with filtering and a random pick."""

__version__ = "0.1.0"
