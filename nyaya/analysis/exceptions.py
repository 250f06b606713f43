class SchemaMismatchError(Exception):
    """Raised when parsed model output does not fit the task's result schema.

    Internal only: ResponseValidator converts it into a fallback result.
    """
