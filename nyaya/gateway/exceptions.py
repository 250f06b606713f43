class ModelError(Exception):
    """Base exception for failures calling the external model."""


class ModelUnavailableError(ModelError):
    """Raised when no credentials or configuration exist for the model."""


class ModelTimeoutError(ModelError):
    """Raised when the model call exceeds its timeout."""


class ModelTransportError(ModelError):
    """Raised when the model call fails due to network/HTTP issues."""
