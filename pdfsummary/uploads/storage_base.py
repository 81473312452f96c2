from abc import ABC, abstractmethod
from pathlib import Path


class BaseUploadStorage(ABC):
    """Contract for where and under which name uploads are stored."""

    @abstractmethod
    def destination(self) -> Path:
        """Return the directory new uploads are written to."""

    @abstractmethod
    def filename(self, original_name: str) -> str:
        """Return a server-assigned file name for an upload.

        Args:
            original_name: File name as sent by the client. Only its
                extension is kept.
        """

    @abstractmethod
    def discard(self, path: Path) -> bool:
        """Delete a stored upload if it still exists.

        Returns:
            True if a file was deleted, False if there was nothing to delete.
        """
