"""Minimal task list with a command console and a browser page."""

__version__ = "0.1.0"
