"""Helpers for naming, encoding and decoding common Unix system values and records."""

__version__ = "0.1.0"