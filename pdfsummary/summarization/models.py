from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class SummaryUsage:
    """Token and timing accounting returned alongside a completion."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    total_time: float = 0.0
    queue_time: float = 0.0


@dataclass(frozen=True)
class SummarizationRequest:
    """Chat request sent to the summarization provider."""

    model: str
    system_prompt: str
    user_prompt: str
    temperature: float
    max_tokens: int
    top_p: float


@dataclass(frozen=True)
class SummarizationResult:
    """A generated summary and its usage block."""

    summary: str
    usage: SummaryUsage = field(default_factory=SummaryUsage)


class FailureKind(str, Enum):
    NO_SUMMARY = "no_summary"
    AUTHENTICATION = "authentication"
    UPSTREAM = "upstream"
    TRANSPORT = "transport"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class SummarizationFailure:
    """Why a summarization attempt did not produce a result."""

    kind: FailureKind
    status_code: int
    message: str


SummaryOutcome = SummarizationResult | SummarizationFailure
