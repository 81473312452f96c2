"""
Summarize Endpoint

Accepts a single PDF upload in the ``pdf`` form field and returns an
AI-generated summary together with the provider's usage block.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from pdfsummary.api.handler import SummarizeHandler

router = APIRouter(prefix="/api", tags=["summarize"])

UPLOAD_FIELD = "pdf"


def get_summarize_handler(request: Request) -> SummarizeHandler:
    return request.app.state.summarize_handler


@router.post(
    "/summarize",
    summary="Summarize an uploaded PDF",
    response_description="Summary text and token usage",
)
async def summarize_pdf(request: Request) -> JSONResponse:
    """
    Reads the multipart body, picks the ``pdf`` file field and hands it to
    the summarize handler. A missing field, or a ``pdf`` field that is not a
    file, is treated as no upload. A body declared larger than the upload
    limit is refused before it is read.
    """
    handler = get_summarize_handler(request)
    rejection = handler.reject_oversize_body(request.headers.get("content-length"))
    if rejection is not None:
        return rejection
    async with request.form() as form:
        field = form.get(UPLOAD_FIELD)
        upload = field if isinstance(field, UploadFile) else None
        return await handler.handle(upload)
