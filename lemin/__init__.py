"""Ant farm solver: parse a farm, find the shortest route and move the ants."""

__version__ = "1.0.0"