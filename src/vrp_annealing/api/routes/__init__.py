"""Route group exports."""

from . import anneal, health

__all__ = ["anneal", "health"]
