"""emoji_picker - type a few letters, get the emoji you meant."""

__version__ = "0.1.0"
