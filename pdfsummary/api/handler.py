from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from pdfsummary.api.errors import error_response
from pdfsummary.logging.logger import Log
from pdfsummary.pdf.base import BasePdfExtractor
from pdfsummary.summarization.base import BaseSummarizer
from pdfsummary.summarization.models import (
    FailureKind,
    SummarizationFailure,
    SummarizationResult,
)
from pdfsummary.uploads.exceptions import UploadRejectedError
from pdfsummary.uploads.models import UploadedDocument
from pdfsummary.uploads.receiver import UploadReceiver
from pdfsummary.uploads.storage_base import BaseUploadStorage

NO_FILE_MESSAGE = "No PDF file uploaded"
NO_TEXT_MESSAGE = "No extractable text found in PDF"
INTERNAL_ERROR_PREFIX = "Internal server error: "

# Failures whose provider status and message are passed through unchanged.
_PASSTHROUGH_KINDS = frozenset({FailureKind.AUTHENTICATION, FailureKind.UPSTREAM})


class SummarizeHandler:
    """Runs one summarization request end-to-end.

    Lifecycle: receive upload -> extract text -> summarize -> delete the
    stored file -> respond. The stored file is deleted on every path once
    it has been written.
    """

    def __init__(
        self,
        receiver: UploadReceiver,
        storage: BaseUploadStorage,
        extractor: BasePdfExtractor,
        summarizer: BaseSummarizer,
    ) -> None:
        self._receiver = receiver
        self._storage = storage
        self._extractor = extractor
        self._summarizer = summarizer

    def reject_oversize_body(self, content_length: str | None) -> JSONResponse | None:
        """Answer 400 up front when the declared body size exceeds the limit."""
        try:
            self._receiver.check_declared_length(content_length)
        except UploadRejectedError as exc:
            Log.warning(f"Upload rejected from Content-Length {content_length}: {exc}")
            return error_response(400, str(exc))
        return None

    async def handle(self, upload: UploadFile | None) -> JSONResponse:
        if upload is None:
            Log.warning("Summarize request without a PDF file")
            return error_response(400, NO_FILE_MESSAGE)

        try:
            document = await self._receiver.receive(upload)
        except UploadRejectedError as exc:
            Log.warning(f"Upload '{upload.filename}' rejected: {exc}")
            return error_response(400, str(exc))

        Log.info(f"Processing file: {document.original_filename}")
        try:
            return await self._summarize_document(document)
        except Exception as exc:
            Log.exception(f"Failed to summarize '{document.original_filename}': {exc}")
            return error_response(500, f"{INTERNAL_ERROR_PREFIX}{exc}")
        finally:
            self._cleanup(document)

    async def _summarize_document(self, document: UploadedDocument) -> JSONResponse:
        pdf_bytes = await run_in_threadpool(document.path.read_bytes)
        text = await run_in_threadpool(self._extractor.extract, pdf_bytes)
        if not text.strip():
            Log.warning(f"No text extracted from '{document.original_filename}'")
            return error_response(400, NO_TEXT_MESSAGE)
        Log.info(f"Extracted {len(text)} chars from '{document.original_filename}'")

        outcome = await run_in_threadpool(self._summarizer.summarize, text)
        if isinstance(outcome, SummarizationFailure):
            return self._failure_response(outcome)
        return self._success_response(outcome)

    @staticmethod
    def _success_response(result: SummarizationResult) -> JSONResponse:
        return JSONResponse(
            content={
                "summary": result.summary,
                "usage": {
                    "promptTokens": result.usage.prompt_tokens,
                    "completionTokens": result.usage.completion_tokens,
                    "totalTokens": result.usage.total_tokens,
                    "processingTime": result.usage.total_time,
                },
            }
        )

    @staticmethod
    def _failure_response(failure: SummarizationFailure) -> JSONResponse:
        if failure.kind in _PASSTHROUGH_KINDS:
            return error_response(failure.status_code, failure.message)
        return error_response(500, f"{INTERNAL_ERROR_PREFIX}{failure.message}")

    def _cleanup(self, document: UploadedDocument) -> None:
        try:
            if self._storage.discard(document.path):
                Log.debug(f"Removed temporary file {document.path}")
        except OSError as exc:
            Log.error(f"Failed to remove temporary file {document.path}: {exc}")
