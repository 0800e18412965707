"""Terminal browser/editor for ~/.ssh/config host blocks."""

__version__ = "0.1.0"
