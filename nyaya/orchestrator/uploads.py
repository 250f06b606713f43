from pathlib import PurePath
from typing import Final

from nyaya.extraction.models import SourceDocument
from nyaya.extraction.text_extractor import (
    DOC_MIME,
    DOCX_MIME,
    HTML_MIME,
    PDF_MIME,
    TEXT_MIME,
    normalize_mime_type,
)
from nyaya.orchestrator.exceptions import UnsupportedMediaTypeError, UploadTooLargeError

ACCEPTED_MIME_TYPES: Final = frozenset({PDF_MIME, DOC_MIME, DOCX_MIME, TEXT_MIME, HTML_MIME})

_EXTENSION_MIME_TYPES: Final = {
    ".pdf": PDF_MIME,
    ".doc": DOC_MIME,
    ".docx": DOCX_MIME,
    ".txt": TEXT_MIME,
    ".html": HTML_MIME,
    ".htm": HTML_MIME,
}

_GENERIC_MIME_TYPES: Final = frozenset({"", "application/octet-stream"})

# Compound File Binary header of pre-2007 Word files, which python-docx cannot read.
_LEGACY_WORD_SIGNATURE: Final = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def build_source_document(
    data: bytes,
    *,
    mime_type: str | None,
    filename: str | None,
    max_bytes: int,
) -> SourceDocument:
    """Validate an upload and wrap it as a SourceDocument.

    A missing or generic content type is resolved from the file extension.

    Raises:
        UploadTooLargeError: if *data* is larger than *max_bytes*.
        UnsupportedMediaTypeError: if the type is not accepted, or the file is
            a legacy binary Word document.
    """
    if len(data) > max_bytes:
        raise UploadTooLargeError(
            f"File exceeds the {max_bytes // (1024 * 1024)} MB upload limit"
        )
    name = filename or ""
    resolved = resolve_mime_type(mime_type or "", name)
    if resolved not in ACCEPTED_MIME_TYPES:
        raise UnsupportedMediaTypeError(
            f"Unsupported file type '{mime_type or PurePath(name).suffix or 'unknown'}'. "
            "Accepted: PDF, DOC/DOCX (Word 2007 or later), TXT, HTML"
        )
    if resolved == DOC_MIME and data.startswith(_LEGACY_WORD_SIGNATURE):
        raise UnsupportedMediaTypeError(
            "Legacy binary .doc files are not supported. Save the document as .docx"
        )
    return SourceDocument(data=data, mime_type=resolved, filename=name)


def resolve_mime_type(mime_type: str, filename: str) -> str:
    normalized = normalize_mime_type(mime_type)
    if normalized in _GENERIC_MIME_TYPES:
        return _EXTENSION_MIME_TYPES.get(PurePath(filename).suffix.lower(), normalized)
    return normalized
