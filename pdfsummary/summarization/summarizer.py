"""AI-powered text summarizer."""

from pathlib import Path

from pdfsummary.logging.logger import Log
from pdfsummary.summarization.base import BaseSummarizer
from pdfsummary.summarization.client_base import BaseSummarizationClient
from pdfsummary.summarization.exceptions import (
    EmptySummaryError,
    SummarizationApiError,
    SummarizationAuthError,
    SummarizationError,
    SummarizationNetworkError,
)
from pdfsummary.summarization.models import (
    FailureKind,
    SummarizationFailure,
    SummarizationRequest,
    SummaryOutcome,
)
from pdfsummary.summarization.prompt_loader import load_prompt_template, load_system_prompt

INVALID_API_KEY_MESSAGE = "Invalid Groq API key"


class Summarizer(BaseSummarizer):
    """Summarizes document text through a chat-completion provider."""

    def __init__(
        self,
        *,
        client: BaseSummarizationClient,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        top_p: float = 0.95,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._top_p = top_p
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)

    def summarize(self, text: str) -> SummaryOutcome:
        if not text.strip():
            raise ValueError("Text to summarize must not be empty")

        request = self._build_request(text)
        Log.info(f"Sending summarization request ({len(text)} chars) to model {self._model}")

        try:
            result = self._client.create_chat_completion(request)
        except EmptySummaryError as exc:
            return self._fail(FailureKind.NO_SUMMARY, 500, str(exc))
        except SummarizationAuthError as exc:
            Log.debug(str(exc))
            return self._fail(FailureKind.AUTHENTICATION, 401, INVALID_API_KEY_MESSAGE)
        except SummarizationApiError as exc:
            return self._fail(FailureKind.UPSTREAM, exc.status_code, exc.message)
        except SummarizationNetworkError as exc:
            return self._fail(FailureKind.TRANSPORT, 500, str(exc))
        except SummarizationError as exc:
            return self._fail(FailureKind.UNEXPECTED, 500, str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected summarization failure: {exc}")
            return self._fail(FailureKind.UNEXPECTED, 500, str(exc))

        usage = result.usage
        Log.info(
            "Summarization usage: "
            f"prompt_tokens={usage.prompt_tokens} "
            f"completion_tokens={usage.completion_tokens} "
            f"total_tokens={usage.total_tokens} "
            f"total_time={usage.total_time} "
            f"queue_time={usage.queue_time}"
        )
        return result

    def _build_request(self, text: str) -> SummarizationRequest:
        return SummarizationRequest(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=self._prompt_template.format(text=text),
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            top_p=self._top_p,
        )

    @staticmethod
    def _fail(kind: FailureKind, status_code: int, message: str) -> SummarizationFailure:
        Log.error(f"Summarization failed ({kind.value}, status {status_code}): {message}")
        return SummarizationFailure(kind=kind, status_code=status_code, message=message)
