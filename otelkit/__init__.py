"""Semantic-convention attributes, span status mapping, metadata carriers and console logging."""

__version__ = "0.1.0"