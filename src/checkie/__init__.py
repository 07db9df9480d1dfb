"""Checkie: draughts move generation and bot search."""

__version__ = "0.1.0"
