from typing import ClassVar

from nyaya.extraction.base import BaseTextExtractor
from nyaya.extraction.docx_adapter import DocxAdapter
from nyaya.extraction.html_adapter import HtmlAdapter
from nyaya.extraction.models import SourceDocument
from nyaya.extraction.plain_text_adapter import PlainTextAdapter
from nyaya.logging.logger import Log

PDF_MIME = "application/pdf"
DOC_MIME = "application/msword"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
HTML_MIME = "text/html"
TEXT_MIME = "text/plain"


def normalize_mime_type(mime_type: str) -> str:
    """Drop parameters and case: 'Text/HTML; charset=utf-8' -> 'text/html'."""
    return mime_type.split(";", 1)[0].strip().lower()


class TextExtractor:
    """Dispatches an uploaded document to the adapter for its declared MIME type.

    PDF goes to the configured PDF engine, Word formats to python-docx, HTML to
    BeautifulSoup. Everything else is decoded as UTF-8 text.
    """

    # application/msword is routed here for .doc uploads that are really OOXML.
    # Binary Word 97-2003 files are turned away at the upload boundary.
    WORD_MIME_TYPES: ClassVar[frozenset[str]] = frozenset({DOC_MIME, DOCX_MIME})

    def __init__(
        self,
        pdf_extractor: BaseTextExtractor,
        word_extractor: BaseTextExtractor | None = None,
        html_extractor: BaseTextExtractor | None = None,
        text_extractor: BaseTextExtractor | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._word_extractor = word_extractor or DocxAdapter()
        self._html_extractor = html_extractor or HtmlAdapter()
        self._text_extractor = text_extractor or PlainTextAdapter()

    def extract(self, document: SourceDocument) -> str:
        """Convert *document* to plain text.

        Raises:
            ExtractionError: if the bytes cannot be decoded for the declared type.
        """
        adapter = self._select(normalize_mime_type(document.mime_type))
        text = adapter.extract(document.data)
        Log.info(
            f"Extracted {len(text)} chars from '{document.filename or 'upload'}' "
            f"({document.mime_type or 'unknown type'})"
        )
        return text

    def _select(self, mime_type: str) -> BaseTextExtractor:
        if mime_type == PDF_MIME:
            return self._pdf_extractor
        if mime_type in self.WORD_MIME_TYPES:
            return self._word_extractor
        if mime_type == HTML_MIME:
            return self._html_extractor
        return self._text_extractor
