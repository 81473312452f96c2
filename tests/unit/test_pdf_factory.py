from unittest.mock import patch

import pytest

from pdfsummary.pdf.factory import PdfExtractorFactory
from pdfsummary.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdfsummary.pdf.pymupdf_adapter import PyMuPdfAdapter
from pdfsummary.pdf.static_adapter import StaticTextAdapter


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("pdfsummary.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_creates_static_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("static"))
        assert isinstance(adapter, StaticTextAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(_make_settings("textract"))
