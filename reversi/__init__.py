"""Terminal Reversi: board engine, automated opponent and CLI front ends."""

__version__ = "0.1.0"
