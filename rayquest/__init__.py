"""A grid-based raycasting engine with a minimap, first-person wall view and small text and number helpers."""

__version__ = "0.1.0"