"""Difference-blend trails that show the changes across a sequence of images."""

__version__ = "0.1.0"
__all__ = ["__version__"]