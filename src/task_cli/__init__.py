"""task-cli: a small personal task tracker for the terminal."""

__version__ = "1.0.0"
