"""Ingestion and normalization core for the log insights dashboard."""

__version__ = "0.1.0"
