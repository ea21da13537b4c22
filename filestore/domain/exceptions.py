"""
Domain exceptions for the file store.
"""


class FileStoreError(Exception):
    """Base exception for file store errors."""
    pass


class DocumentValidationError(FileStoreError):
    """Exception raised when a document cannot be built or is malformed."""
    pass
