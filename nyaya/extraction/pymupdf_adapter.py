import pymupdf

from nyaya.extraction.base import BaseTextExtractor
from nyaya.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Alternative PDF engine selected with ``PDF_ENGINE=pymupdf``; same page-order contract."""

    def extract(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
