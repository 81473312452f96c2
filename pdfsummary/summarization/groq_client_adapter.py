from collections.abc import Mapping

import httpx
import openai

from pdfsummary.summarization.client_base import BaseSummarizationClient
from pdfsummary.summarization.exceptions import (
    EmptySummaryError,
    SummarizationApiError,
    SummarizationAuthError,
    SummarizationError,
    SummarizationNetworkError,
)
from pdfsummary.summarization.models import (
    SummarizationRequest,
    SummarizationResult,
    SummaryUsage,
)


class GroqClientAdapter(BaseSummarizationClient):
    """Summarization client built on Groq's OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str,
    ) -> None:
        # One attempt per request: the SDK's built-in retries are off.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(self, request: SummarizationRequest) -> SummarizationResult:
        try:
            response = self._client.chat.completions.create(
                model=request.model,
                temperature=request.temperature,
                max_tokens=request.max_tokens,
                top_p=request.top_p,
                messages=[
                    {"role": "system", "content": request.system_prompt},
                    {"role": "user", "content": request.user_prompt},
                ],
            )
        except openai.AuthenticationError as exc:
            raise SummarizationAuthError(f"AI provider rejected credentials: {exc}") from exc
        except openai.APIStatusError as exc:
            message = _error_message(exc)
            if message is None:
                raise SummarizationError(f"AI provider API error: {exc.message}") from exc
            raise SummarizationApiError(exc.status_code, message) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(
                f"AI provider network error: {_describe(exc)}"
            ) from exc
        except openai.APIError as exc:
            raise SummarizationError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise EmptySummaryError("No summary generated from the API")
        content = response.choices[0].message.content
        if not content:
            raise EmptySummaryError("No summary generated from the API")
        return SummarizationResult(summary=content, usage=_usage_from(response.usage))


def _usage_from(usage: object) -> SummaryUsage:
    if usage is None:
        return SummaryUsage()
    # total_time and queue_time are Groq extensions to the usage block.
    return SummaryUsage(
        prompt_tokens=int(getattr(usage, "prompt_tokens", 0) or 0),
        completion_tokens=int(getattr(usage, "completion_tokens", 0) or 0),
        total_tokens=int(getattr(usage, "total_tokens", 0) or 0),
        total_time=float(getattr(usage, "total_time", 0.0) or 0.0),
        queue_time=float(getattr(usage, "queue_time", 0.0) or 0.0),
    )


def _error_message(exc: openai.APIStatusError) -> str | None:
    """Pull the provider's own error message out of a structured error body.

    Returns None when the body is not a JSON error object (HTML, plain text,
    empty), so the caller can treat it as an unexpected failure.
    """
    body = exc.body
    if not isinstance(body, Mapping):
        return None
    error = body.get("error", body)
    if isinstance(error, str) and error:
        return error
    if isinstance(error, Mapping):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def _describe(exc: Exception) -> str:
    cause = exc.__cause__
    if cause is not None and str(cause) and str(cause) != str(exc):
        return f"{exc} ({cause})"
    return str(exc)
