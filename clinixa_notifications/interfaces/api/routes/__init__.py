from fastapi import FastAPI

from .inbox import router as inbox_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(inbox_router)
