from abc import ABC, abstractmethod

from pdfsummary.summarization.models import SummaryOutcome


class BaseSummarizer(ABC):
    """Contract for all summarizers."""

    @abstractmethod
    def summarize(self, text: str) -> SummaryOutcome:
        """Summarize text with a single provider call.

        Args:
            text: Non-empty text obtained from the uploaded document.

        Returns:
            SummarizationResult on success, SummarizationFailure otherwise.
            Provider failures are never raised.
        """
