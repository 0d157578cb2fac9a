"""Emoji-powered git CLI."""

__version__ = "0.1.0"
