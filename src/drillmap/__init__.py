"""DrillMap - drilling data intake and channel mapping wizard."""

__version__ = "0.1.0"
