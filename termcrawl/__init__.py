"""Crawl the web from a seed URL, count search terms per page, rank the busiest pages."""

__version__ = "0.1.0"
