class UploadRejectedError(Exception):
    """Base exception for uploads refused by the upload layer."""


class UnsupportedMediaTypeError(UploadRejectedError):
    """Raised when the uploaded file is not a PDF."""


class FileTooLargeError(UploadRejectedError):
    """Raised when the uploaded file exceeds the configured size limit."""
