"""lrbind: Lightroom develop-parameter binding generator."""

__version__ = "0.1"
