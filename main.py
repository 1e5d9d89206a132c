import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shorty.config import settings
from shorty.core.logging_config import configure_logging
from shorty.database.connection import engine, Base
from shorty.dependencies import get_short_code_strategy
from shorty.api.v1 import urls, redirect

# Import models to ensure they're registered with Base
from shorty.models import ShortLink

logger = configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Invalid codec settings raise ConfigurationError here and abort startup
    get_short_code_strategy()
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    engine.dispose()
    logger.info("%s stopped", settings.app_name)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener with a bijective, optionally salted short code codec",
    debug=settings.debug,
    lifespan=lifespan
)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


######## Include routers
app.include_router(urls.router, prefix="/api/v1")
app.include_router(urls.query_router)
# Catch-all short code route goes last
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port)
