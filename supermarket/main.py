"""FastAPI application entry point."""

from supermarket.application import create_app
from supermarket.config import settings

app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "supermarket.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()


__all__ = ["app", "run"]
