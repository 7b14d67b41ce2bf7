import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from .config import settings
from .db import init_db, close_db
from .errors import register_error_handlers
from .logging_setup import setup_logging
from .routes import tasks

__version__ = "1.0.0"

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.warning("Database connection failed: %s", e)
        logger.warning("Application will start but database features may not work")
    yield
    # Shutdown
    await close_db()


# Create FastAPI app
app = FastAPI(
    title="Task API",
    description="A minimal task-management REST API",
    version=__version__,
    lifespan=lifespan
)

logger.info("CORS origins: %s", settings.allowed_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_error_handlers(app)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.debug("Incoming %s %s from %s", request.method, request.url.path, request.client)
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


app.include_router(tasks.router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Task API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "OK", "message": "Server is running"}


def run():
    import uvicorn

    uvicorn.run(
        "task_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
