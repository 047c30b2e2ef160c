"""A small interactive shell with raw-mode line editing and tab completion."""

__version__ = "0.1.0"
