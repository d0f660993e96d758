"""OrderHub - restaurant order backend."""

__version__ = "0.1.0"
