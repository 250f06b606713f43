class ExtractionError(Exception):
    """Raised when an uploaded artifact cannot be decoded for its declared type."""
