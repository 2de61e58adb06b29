"""Heading, wind, layline and wind-shift sector logic for a marine wind dial."""

__version__ = "0.1.0"
