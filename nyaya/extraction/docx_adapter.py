import io

import docx

from nyaya.extraction.base import BaseTextExtractor
from nyaya.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts raw paragraph and table text from Word documents, dropping styling."""

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as exc:
            raise ExtractionError(f"Word document extraction failed: {exc}") from exc

        parts = [p.text for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    parts.append(" | ".join(cells))
        return "\n".join(parts).strip()
