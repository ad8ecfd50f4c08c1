"""Sleep monitoring server: sensor ingestion and sleep analytics."""

__version__ = "0.1.0"
