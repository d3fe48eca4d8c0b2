"""XPM image reading, X11 colour names, and small text and list utilities."""

__version__ = "0.1.0"