"""Rendering and on-disk storage of exported issues."""

from .manager import MarkdownStorage, ensure_directory
from .renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer", "MarkdownStorage", "ensure_directory"]
