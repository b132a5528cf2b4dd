"""Dodge the bouncing balls: a small pygame arcade game with power-ups and a high score."""

__version__ = "0.1.0"