"""Employee and performance review records with SQLite storage."""

__version__ = "0.1.0"