"""Reads endpoint input from either a JSON body or a form body."""

import json
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

from nyaya.extraction.models import SourceDocument
from nyaya.orchestrator.exceptions import InvalidInputError
from nyaya.orchestrator.uploads import build_source_document

_FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


@dataclass
class RequestPayload:
    fields: dict[str, Any] = field(default_factory=dict)
    file: UploadFile | None = None

    def text(self, name: str) -> str | None:
        value = self.fields.get(name)
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidInputError(f"'{name}' must be a string")
        return value

    def string_list(self, name: str) -> list[str] | None:
        """Read a list field; form bodies may send it comma-separated or repeated."""
        value = self.fields.get(name)
        if value is None:
            return None
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise InvalidInputError(f"'{name}' must be a list of strings")
        return [v.strip() for v in value if v.strip()]


async def read_payload(request: Request) -> RequestPayload:
    """Parse the request body. An empty body yields an empty payload."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(_FORM_CONTENT_TYPES):
        return await _read_form(request)

    body = await request.body()
    if not body.strip():
        return RequestPayload()
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise InvalidInputError("Request body must be valid JSON") from exc
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return RequestPayload(fields=data)


async def _read_form(request: Request) -> RequestPayload:
    form = await request.form()
    payload = RequestPayload()
    for key in form.keys():
        values = [v for v in form.getlist(key) if isinstance(v, str)]
        uploads = [v for v in form.getlist(key) if isinstance(v, UploadFile)]
        if key == "file" and uploads:
            payload.file = uploads[0]
        elif len(values) == 1:
            payload.fields[key] = values[0]
        elif values:
            payload.fields[key] = values
    return payload


async def read_document(payload: RequestPayload, max_bytes: int) -> SourceDocument | None:
    """Read the uploaded file, if any, into a validated SourceDocument."""
    upload = payload.file
    if upload is None:
        return None
    data = await upload.read(max_bytes + 1)
    await upload.close()
    return build_source_document(
        data,
        mime_type=upload.content_type,
        filename=upload.filename,
        max_bytes=max_bytes,
    )
