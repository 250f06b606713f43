import uvicorn

from nyaya.api.app import create_app
from nyaya.config.settings import Settings
from nyaya.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(
        f"Starting Nyaya Saar API on {settings.host}:{settings.port} "
        f"(model provider: {settings.model_provider})"
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
