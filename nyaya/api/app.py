from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.responses import Response

from nyaya.api.errors import error_response, register_exception_handlers
from nyaya.api.routes import router
from nyaya.config.settings import Settings
from nyaya.logging.logger import Log
from nyaya.orchestrator.orchestrator import AnalysisOrchestrator, build_orchestrator


def create_app(
    settings: Settings | None = None,
    orchestrator: AnalysisOrchestrator | None = None,
) -> FastAPI:
    """Build the HTTP application.

    Serve with ``uvicorn nyaya.api.app:create_app --factory`` or ``nyaya.main``.
    """
    settings = settings or Settings()
    app = FastAPI(title="Nyaya Saar Legal Analysis API")
    app.state.settings = settings
    app.state.orchestrator = orchestrator or build_orchestrator(settings)

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:  # type: ignore[no-untyped-def]
        try:
            response = await call_next(request)
        except Exception as exc:
            Log.error(
                f"Unhandled error: {exc}", method=request.method, path=request.url.path
            )
            response = error_response(500, "Internal server error", "internal_error")
        Log.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
        )
        return response

    register_exception_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)
    return app
