from unittest.mock import patch

import pytest

from nyaya.extraction.factory import TextExtractorFactory
from nyaya.extraction.pdfplumber_adapter import PdfPlumberAdapter
from nyaya.extraction.pymupdf_adapter import PyMuPdfAdapter
from nyaya.extraction.text_extractor import TextExtractor


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("nyaya.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


class TestTextExtractorFactory:
    def test_creates_text_extractor(self) -> None:
        extractor = TextExtractorFactory.create(_make_settings("pdfplumber"))
        assert isinstance(extractor, TextExtractor)

    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = TextExtractorFactory.create_pdf_extractor(_make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = TextExtractorFactory.create_pdf_extractor(_make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = TextExtractorFactory.create_pdf_extractor(_make_settings("PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            TextExtractorFactory.create(_make_settings("unknown"))
