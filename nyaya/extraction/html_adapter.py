from typing import ClassVar

from bs4 import BeautifulSoup

from nyaya.extraction.base import BaseTextExtractor
from nyaya.extraction.exceptions import ExtractionError


class HtmlAdapter(BaseTextExtractor):
    """Returns the visible text of an HTML page."""

    NON_CONTENT_TAGS: ClassVar[tuple[str, ...]] = ("script", "style", "noscript", "template")

    def extract(self, data: bytes) -> str:
        try:
            html = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"HTML is not valid UTF-8: {exc}") from exc

        soup = BeautifulSoup(html, "html.parser")
        for tag in soup(list(self.NON_CONTENT_TAGS)):
            tag.decompose()
        lines = (line.strip() for line in soup.get_text("\n").splitlines())
        return "\n".join(line for line in lines if line)
