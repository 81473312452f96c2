from pathlib import Path

from starlette.datastructures import UploadFile

from pdfsummary.logging.logger import Log
from pdfsummary.uploads.exceptions import FileTooLargeError, UnsupportedMediaTypeError
from pdfsummary.uploads.models import UploadedDocument
from pdfsummary.uploads.storage_base import BaseUploadStorage

PDF_MIME_TYPE = "application/pdf"


class UploadReceiver:
    """Validates an incoming upload and writes it to temporary storage."""

    CHUNK_SIZE = 64 * 1024
    # Allowance for multipart boundaries, part headers and small form fields.
    MULTIPART_OVERHEAD = 64 * 1024

    def __init__(self, storage: BaseUploadStorage, max_file_size: int) -> None:
        self._storage = storage
        self._max_file_size = max_file_size

    def check_declared_length(self, content_length: str | None) -> None:
        """Reject a request body whose declared length cannot fit the limit.

        Runs before the multipart body is read, so an oversize upload is
        refused without being received. A missing or malformed header is
        left to the streaming check in receive().

        Raises:
            FileTooLargeError: if Content-Length exceeds the limit plus the
                multipart overhead allowance.
        """
        if content_length is None or not content_length.strip().isdigit():
            return
        if int(content_length) > self._max_file_size + self.MULTIPART_OVERHEAD:
            raise FileTooLargeError(self._too_large_message())

    async def receive(self, upload: UploadFile) -> UploadedDocument:
        """Store the upload and describe it.

        The type check happens before anything is written. The size limit is
        enforced while streaming; a partially written file is removed.

        Raises:
            UnsupportedMediaTypeError: if the MIME type is not application/pdf.
            FileTooLargeError: if the body exceeds the configured limit.
        """
        if upload.content_type != PDF_MIME_TYPE:
            raise UnsupportedMediaTypeError("Only PDF files are allowed!")

        original_name = upload.filename or ""
        path = self._storage.destination() / self._storage.filename(original_name)
        try:
            size = await self._write(upload, path)
        except BaseException:
            self._storage.discard(path)
            raise

        Log.debug(f"Stored upload '{original_name}' at {path} ({size} bytes)")
        return UploadedDocument(
            original_filename=original_name,
            path=path,
            mime_type=upload.content_type,
            size_bytes=size,
        )

    async def _write(self, upload: UploadFile, path: Path) -> int:
        size = 0
        with path.open("wb") as out:
            while True:
                chunk = await upload.read(self.CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > self._max_file_size:
                    raise FileTooLargeError(self._too_large_message())
                out.write(chunk)
        return size

    def _too_large_message(self) -> str:
        mib = 1024 * 1024
        if self._max_file_size >= mib and self._max_file_size % mib == 0:
            limit = f"{self._max_file_size // mib}MB"
        else:
            limit = f"{self._max_file_size} bytes"
        return f"File size too large. Maximum size is {limit}"
