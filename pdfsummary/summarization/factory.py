from pdfsummary.config.settings import Settings
from pdfsummary.summarization.base import BaseSummarizer
from pdfsummary.summarization.example_client_adapter import ExampleClientAdapter
from pdfsummary.summarization.groq_client_adapter import GroqClientAdapter
from pdfsummary.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured summarizer."""

    PROVIDERS = ("groq", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        """Create a configured summarizer from application settings."""
        provider = settings.summarization_provider.lower()
        if provider == "example":
            return Summarizer(client=ExampleClientAdapter(), model="example")
        if provider != "groq":
            raise ValueError(
                f"Unknown summarization provider '{provider}'. "
                f"Choose from: {list(cls.PROVIDERS)}"
            )
        client = GroqClientAdapter(
            api_key=settings.groq_api_key,
            timeout_seconds=settings.groq_timeout_seconds,
            base_url=settings.groq_base_url,
        )
        return Summarizer(
            client=client,
            model=settings.groq_model_name,
            temperature=settings.summary_temperature,
            max_tokens=settings.summary_max_tokens,
            top_p=settings.summary_top_p,
        )
