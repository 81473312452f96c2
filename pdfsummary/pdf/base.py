from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw content of the uploaded PDF file.

        Returns:
            Extracted text as a single stripped string. Empty when the
            document carries no text layer.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
