"""Version information for capflow."""

__version__ = "0.1.0"
