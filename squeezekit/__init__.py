"""Compressor metering ballistics, a level meter and toolkit-free meter widget models."""

__version__ = "0.1.0"