"""Delve: a layered-map progression game engine."""

__version__ = "0.1.0"
