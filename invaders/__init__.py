"""A Space Invaders arcade game built on pygame, with its rules usable without a window."""

__version__ = "0.1.0"