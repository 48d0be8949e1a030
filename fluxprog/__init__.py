"""Flowchart blocks, their numeric codes and the flowchart text file format."""

__version__ = "0.1.0"
__all__ = ["constants", "blocks", "flowfile"]