"""Book indexing - scans the sources and renders the navigation summary."""

from .scanner import README_FILE, SUMMARY_FILE, BookScanner, Document, Group, extract_title
from .summary import SummaryOptions, render_summary, render_summary_lines

__all__ = [
    "README_FILE",
    "SUMMARY_FILE",
    "BookScanner",
    "Document",
    "Group",
    "SummaryOptions",
    "extract_title",
    "render_summary",
    "render_summary_lines",
]
