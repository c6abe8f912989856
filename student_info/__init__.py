"""Student records service with college enrichment."""

__version__ = "1.0.0"
