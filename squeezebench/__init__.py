"""Lossless byte compressors, integer encoders and a benchmark of compression ratios on integer data."""

__version__ = "0.1.0"