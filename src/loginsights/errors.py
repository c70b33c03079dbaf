class LogInsightsError(Exception):
    """Base class for errors raised by the ingestion core."""
