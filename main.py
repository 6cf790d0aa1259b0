from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from infrastructure.context import CollectionRegistry
from infrastructure.request_logging import RequestLoggingMiddleware, configure_logging

# Import routers
from routers.usuario_router import router as usuario_router
from routers.producto_router import router as producto_router
from config import settings

logger = logging.getLogger("app.startup")


async def plain_text_http_exception_handler(request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(
    collections: Optional[CollectionRegistry] = None,
    *,
    request_logging: Optional[bool] = None,
    static_dir: Optional[str] = None,
) -> FastAPI:
    """Build the application with its own in-memory collections."""

    log_requests = settings.REQUEST_LOGGING if request_logging is None else request_logging

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("Application: %s (%s)", settings.APP_NAME, settings.APP_ENV)
        if log_requests:
            logger.info("Request logging enabled")
        yield
        # Shutdown (if needed)

    app = FastAPI(
        title=settings.APP_NAME,
        description="CRUD API over in-memory usuarios and productos",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.collections = collections if collections is not None else CollectionRegistry.seeded()

    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)

    if log_requests:
        app.add_middleware(RequestLoggingMiddleware)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def greeting():
        return settings.GREETING

    # Health check
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    # Include routers
    app.include_router(usuario_router, prefix="/api", tags=["Usuarios"])
    app.include_router(producto_router, prefix="/api", tags=["Productos"])

    # Static assets are served from the site root after every API route
    public_dir = static_dir or settings.STATIC_DIR
    if os.path.isdir(public_dir):
        app.mount("/", StaticFiles(directory=public_dir), name="public")
    else:
        logger.debug("Static directory %s not found; static files disabled", public_dir)

    return app


configure_logging(settings.LOG_LEVEL)
app = create_app()

# Run app
if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.IS_DEV_MODE)
