"""Player stats browsing: career totals and season-by-season comparisons."""

__version__ = "0.1.0"
