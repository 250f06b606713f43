from nyaya.extraction.base import BaseTextExtractor
from nyaya.extraction.exceptions import ExtractionError


class PlainTextAdapter(BaseTextExtractor):
    """Decodes bytes as UTF-8 verbatim."""

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"Text is not valid UTF-8: {exc}") from exc
