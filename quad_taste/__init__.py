"""Quad-based design taste profiling."""
__version__ = "1.0.0"
