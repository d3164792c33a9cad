"""Configuration, key bindings, themes, terminal image encoding and layout helpers for a terminal file manager."""

__version__ = "0.1.3"