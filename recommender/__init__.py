"""Genre-based song and album recommendation service."""

__version__ = "0.1.0"
