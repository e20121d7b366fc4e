"""Intersection lists and the abstract merger interface for coupling two grids."""

__version__ = "0.1.0"
__all__ = ["intersections", "merger"]