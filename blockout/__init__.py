"""Pit, pieces, sound sequencing, bitmap font and rasterising for a 3D falling-block puzzle."""

__version__ = "0.1.0"
__all__ = ["canvas", "colors", "font", "pit", "psg", "raster", "shapes", "sound"]