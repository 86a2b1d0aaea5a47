"""Helpers for characters, strings, byte buffers, formatting, linked lists and line reading."""

__version__ = "0.1.0"