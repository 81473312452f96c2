class SummarizationError(Exception):
    """Raised when summarization fails."""


class EmptySummaryError(SummarizationError):
    """Raised when the provider answers without usable summary content."""


class SummarizationAuthError(SummarizationError):
    """Raised when the provider rejects the configured credential."""


class SummarizationApiError(SummarizationError):
    """Raised when the provider answers with an HTTP error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class SummarizationNetworkError(SummarizationError):
    """Raised when the provider call fails due to network/infrastructure issues."""
