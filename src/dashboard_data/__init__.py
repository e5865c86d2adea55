"""Procurement dashboard mock dataset: generation, checks and export."""

__version__ = "0.1.0"
