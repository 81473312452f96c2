from pdfsummary.config.settings import Settings
from pdfsummary.pdf.base import BasePdfExtractor
from pdfsummary.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdfsummary.pdf.pymupdf_adapter import PyMuPdfAdapter
from pdfsummary.pdf.static_adapter import StaticTextAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
        "static": StaticTextAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
