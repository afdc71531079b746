"""Four classic recursive fractals in a Qt window."""
__version__ = "1.0.0"
