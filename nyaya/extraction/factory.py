from nyaya.config.settings import Settings
from nyaya.extraction.base import BaseTextExtractor
from nyaya.extraction.pdfplumber_adapter import PdfPlumberAdapter
from nyaya.extraction.pymupdf_adapter import PyMuPdfAdapter
from nyaya.extraction.text_extractor import TextExtractor


class TextExtractorFactory:
    """Builds the upload TextExtractor.

    Only the PDF engine is configurable; the Word, HTML and plain-text
    adapters are fixed.
    """

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(pdf_extractor=cls.create_pdf_extractor(settings))

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
