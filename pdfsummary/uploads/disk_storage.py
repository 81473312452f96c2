import time
import uuid
from pathlib import Path, PurePath

from pdfsummary.uploads.storage_base import BaseUploadStorage


class DiskUploadStorage(BaseUploadStorage):
    """Stores uploads as files in a local directory.

    File names are ``{epoch_millis}-{random_hex}{ext}`` so that uploads
    arriving in the same millisecond never share a path.
    """

    def __init__(self, upload_dir: Path | str) -> None:
        self._upload_dir = Path(upload_dir)

    def ensure_destination(self) -> Path:
        """Create the upload directory if it does not exist yet."""
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        return self._upload_dir

    def destination(self) -> Path:
        return self._upload_dir

    def filename(self, original_name: str) -> str:
        suffix = PurePath(original_name).suffix.lower()
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex}{suffix}"

    def discard(self, path: Path) -> bool:
        if not path.exists():
            return False
        path.unlink(missing_ok=True)
        return True
