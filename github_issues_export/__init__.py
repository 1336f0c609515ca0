"""Export GitHub issues and their comments into markdown files."""

__version__ = "0.2.0"
