"""
Application factory for the PDF summary API.

Builds the FastAPI application from an explicit Settings object, wires the
upload receiver, text extractor and summarizer into the summarize handler,
and registers routers, CORS and error responders.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdfsummary.api.errors import register_error_handlers
from pdfsummary.api.handler import SummarizeHandler
from pdfsummary.api.routers.health import router as health_router
from pdfsummary.api.routers.summarize import router as summarize_router
from pdfsummary.config.settings import Settings
from pdfsummary.pdf.base import BasePdfExtractor
from pdfsummary.pdf.factory import PdfExtractorFactory
from pdfsummary.summarization.base import BaseSummarizer
from pdfsummary.summarization.factory import SummarizerFactory
from pdfsummary.uploads.disk_storage import DiskUploadStorage
from pdfsummary.uploads.receiver import UploadReceiver
from pdfsummary.uploads.storage_base import BaseUploadStorage


def build_summarize_handler(
    settings: Settings,
    *,
    storage: BaseUploadStorage | None = None,
    extractor: BasePdfExtractor | None = None,
    summarizer: BaseSummarizer | None = None,
) -> SummarizeHandler:
    """Build a SummarizeHandler with all required collaborators."""
    if storage is None:
        disk_storage = DiskUploadStorage(settings.upload_dir)
        disk_storage.ensure_destination()
        storage = disk_storage
    return SummarizeHandler(
        receiver=UploadReceiver(storage, settings.max_file_size),
        storage=storage,
        extractor=extractor or PdfExtractorFactory.create(settings),
        summarizer=summarizer or SummarizerFactory.create(settings),
    )


def create_app(
    settings: Settings,
    handler: SummarizeHandler | None = None,
) -> FastAPI:
    app = FastAPI(
        title="PDF Summary",
        description="Upload a PDF and receive an AI-generated summary with token usage.",
        version="1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.state.settings = settings
    app.state.summarize_handler = handler or build_summarize_handler(settings)

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(summarize_router)

    @app.get("/")
    def home() -> dict[str, str]:
        return {"message": "PDF summary server is live. POST a PDF to /api/summarize."}

    return app
