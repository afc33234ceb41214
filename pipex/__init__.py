"""Parse a two-command pipe line and resolve its commands along PATH."""

__version__ = "0.1.0"