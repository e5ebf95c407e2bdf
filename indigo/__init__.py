"""Indigo: a two-player card capturing game against the computer."""

__version__ = "1.0.0"
