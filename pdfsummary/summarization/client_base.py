from abc import ABC, abstractmethod

from pdfsummary.summarization.models import SummarizationRequest, SummarizationResult


class BaseSummarizationClient(ABC):
    """Contract for provider-specific chat-completion clients."""

    @abstractmethod
    def create_chat_completion(self, request: SummarizationRequest) -> SummarizationResult:
        """Send one chat request and return the first choice with usage.

        Raises:
            EmptySummaryError: if the provider returned no content.
            SummarizationAuthError: if the credential was rejected.
            SummarizationApiError: on any other HTTP error status.
            SummarizationNetworkError: on connection failures and timeouts.
        """
