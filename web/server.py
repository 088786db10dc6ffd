"""FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.container import Container, container as default_container
from settings import APP_NAME
from web.api import location_router, register_error_handlers, resources_router


def create_app(container: Container | None = None) -> FastAPI:
    """Build the app around a container that is started and stopped with it."""
    container = container or default_container

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.start()
        try:
            yield
        finally:
            await container.stop()

    app = FastAPI(title=APP_NAME, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(location_router)
    app.include_router(resources_router)

    @app.get("/")
    def root():
        return {"name": APP_NAME, "status": "OK"}

    return app


app = create_app()
