"""API route registration."""

from fastapi import FastAPI

from supermarket.api.routes import produce, system


def include_api_routes(app: FastAPI) -> None:
    """Attach all API routers to the application."""

    app.include_router(system.router)
    app.include_router(produce.router)
