"""Auto-generate an mdBook SUMMARY.md from the layout of the book sources."""

__version__ = "0.1.0"
