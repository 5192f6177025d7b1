"""
Portfolio Calculation Engine

Pure functions that turn the property and renovation collections into
display-ready figures: metrics, filters and groupings, and formatting.
"""

from app.calculations import filters, formatting, metrics

__all__ = ["filters", "formatting", "metrics"]
