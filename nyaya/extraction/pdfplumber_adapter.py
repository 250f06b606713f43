import io

import pdfplumber

from nyaya.extraction.base import BaseTextExtractor
from nyaya.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Default PDF engine: page text layers via pdfplumber, in page order.

    Pages without a text layer contribute nothing, so a scanned PDF comes back
    empty and the orchestrator rejects it before any model call.
    """

    def extract(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
