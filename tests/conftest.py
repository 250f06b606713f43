import io
from collections.abc import Callable

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from nyaya.gateway.client_base import BaseModelClient


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with a heading, a styled run and a table."""
    document = docx.Document()
    document.add_heading("Rental Agreement", level=1)
    paragraph = document.add_paragraph("The tenant shall pay rent ")
    paragraph.add_run("monthly").bold = True
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Deposit"
    table.rows[0].cells[1].text = "50000"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


class StubModelClient(BaseModelClient):
    """Offline model client returning a scripted reply and recording prompts."""

    def __init__(self, reply: str | Callable[[str], str]) -> None:
        self._reply = reply
        self.prompts: list[str] = []
        self.calls: list[dict[str, object]] = []

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        self.prompts.append(user_prompt)
        self.calls.append(
            {"model": model, "temperature": temperature, "max_tokens": max_tokens}
        )
        if callable(self._reply):
            return self._reply(user_prompt)
        return self._reply


@pytest.fixture()
def stub_client_factory() -> type[StubModelClient]:
    return StubModelClient
