"""Four-function desktop calculator."""
__version__ = "0.1.0"
