"""Raster line, circle, arc, polygon and scanline-fill algorithms, with a PPM canvas."""

__version__ = "0.1.0"
__all__ = ["circles", "edgetable", "events", "geometry", "lines", "render"]