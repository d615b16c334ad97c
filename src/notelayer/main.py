# HTTP application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import health_router, notes_router
from .config import Settings, get_settings
from .core.exceptions import NoteLayerError, NoteNotFoundError, ParseError
from .core.logging import LoggingMiddleware, get_logger
from .core.schemas.common import ErrorResponse
from .core.storage import IStorage, create_storage

logger = get_logger("main")


def _error_response(exc: NoteLayerError, status_code: int) -> JSONResponse:
    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        details=exc.details or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def create_app(storage: Optional[IStorage] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application around one storage instance."""
    settings = settings or get_settings()
    storage = storage if storage is not None else create_storage(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(
            "Starting NoteLayer HTTP application",
            extra={
                "version": settings.app_version,
                "environment": settings.environment,
                "storage": storage.name,
            },
        )
        try:
            await storage.init()
        except Exception as e:
            logger.error("Failed to initialise storage", exc_info=e)
            raise

        yield

        logger.info("Shutting down NoteLayer HTTP application")
        await storage.close()

    app = FastAPI(
        title=settings.app_name,
        description="Note CRUD API",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.storage = storage
    app.state.settings = settings

    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError):
        logger.warning(f"Bad request: {exc.message}", extra={"path": request.url.path})
        return _error_response(exc, 400)

    @app.exception_handler(NoteNotFoundError)
    async def not_found_handler(request: Request, exc: NoteNotFoundError):
        return _error_response(exc, 404)

    app.include_router(notes_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        return {"message": f"{settings.app_name} API", "version": settings.app_version}

    return app


if __name__ == "__main__":
    from .cli import main

    raise SystemExit(main(["http"]))
