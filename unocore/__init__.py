"""UNO hand and match engine."""

__version__ = "0.1.0"
