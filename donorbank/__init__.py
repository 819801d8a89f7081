"""Console register of blood donors stored in a plain text file."""

__version__ = "0.1.0"
__all__ = ["__version__"]