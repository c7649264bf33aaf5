"""Parsing, character, byte, string, linked-list, formatting and line-reading helpers."""

__version__ = "0.1.0"