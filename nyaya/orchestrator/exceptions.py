class InvalidInputError(Exception):
    """Raised when the caller omitted or malformed a required input."""


class UploadTooLargeError(InvalidInputError):
    """Raised when an uploaded file exceeds the size limit."""


class UnsupportedMediaTypeError(InvalidInputError):
    """Raised when an uploaded file is not one of the accepted types."""
