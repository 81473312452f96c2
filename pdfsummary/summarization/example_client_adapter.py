"""Example summarization client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseSummarizationClient and register the provider in SummarizerFactory.
"""

from typing import ClassVar

from pdfsummary.summarization.client_base import BaseSummarizationClient
from pdfsummary.summarization.models import (
    SummarizationRequest,
    SummarizationResult,
    SummaryUsage,
)


class ExampleClientAdapter(BaseSummarizationClient):
    """Example adapter that returns a fixed summary.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_SUMMARY: ClassVar[str] = "Example summary of the uploaded document."

    def create_chat_completion(self, request: SummarizationRequest) -> SummarizationResult:
        prompt_tokens = len(request.user_prompt.split())
        completion_tokens = len(self.DEFAULT_SUMMARY.split())
        return SummarizationResult(
            summary=self.DEFAULT_SUMMARY,
            usage=SummaryUsage(
                prompt_tokens=prompt_tokens,
                completion_tokens=completion_tokens,
                total_tokens=prompt_tokens + completion_tokens,
            ),
        )
