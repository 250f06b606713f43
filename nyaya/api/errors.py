from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nyaya.extraction.exceptions import ExtractionError
from nyaya.gateway.exceptions import (
    ModelTimeoutError,
    ModelTransportError,
    ModelUnavailableError,
)
from nyaya.logging.logger import Log
from nyaya.orchestrator.exceptions import (
    InvalidInputError,
    UnsupportedMediaTypeError,
    UploadTooLargeError,
)


def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """Map pipeline failures to HTTP responses with a uniform error body."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        if isinstance(exc, UploadTooLargeError):
            return error_response(413, str(exc), "upload_too_large")
        if isinstance(exc, UnsupportedMediaTypeError):
            return error_response(415, str(exc), "unsupported_media_type")
        return error_response(400, str(exc), "invalid_input")

    @app.exception_handler(ExtractionError)
    async def extraction_failed(request: Request, exc: ExtractionError) -> JSONResponse:
        Log.error(f"Text extraction failed on {request.url.path}: {exc}")
        return error_response(500, "Failed to extract text from file", "extraction_failed")

    @app.exception_handler(ModelUnavailableError)
    async def model_unavailable(request: Request, exc: ModelUnavailableError) -> JSONResponse:
        Log.error(f"Model unavailable on {request.url.path}: {exc}")
        return error_response(503, "AI model is not configured", "model_unavailable")

    @app.exception_handler(ModelTimeoutError)
    async def model_timeout(request: Request, exc: ModelTimeoutError) -> JSONResponse:
        Log.error(f"Model timeout on {request.url.path}: {exc}")
        return error_response(500, "AI model request timed out", "model_timeout")

    @app.exception_handler(ModelTransportError)
    async def model_transport(request: Request, exc: ModelTransportError) -> JSONResponse:
        Log.error(f"Model transport error on {request.url.path}: {exc}")
        return error_response(500, "Failed to get response from AI model", "model_transport_error")

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return error_response(404, "Endpoint not found", "not_found")
        return error_response(exc.status_code, str(exc.detail), "http_error")
