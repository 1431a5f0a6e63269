"""Sprite attack animations, an attack viewer, an attack loop and a character selection screen."""

__version__ = "0.1.0"