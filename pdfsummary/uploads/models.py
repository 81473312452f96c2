from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedDocument:
    """A received upload stored in temporary storage for one request."""

    original_filename: str
    path: Path
    mime_type: str
    size_bytes: int
