"""Isometric wireframe viewer for .fdf height maps."""

__version__ = "1.0.0"