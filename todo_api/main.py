import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from . import config, middleware
from .db import init_db, close_db
from .logging_setup import setup_logging
from .routes import auth, tasks

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    await init_db()
    logger.info("Database initialized successfully")
    yield
    # Shutdown
    await close_db()


# Create FastAPI app
app = FastAPI(
    title=config.APP_TITLE,
    description="REST API for a personal to-do list: per-user tasks with filtering, sorting and pagination",
    version=config.APP_VERSION,
    lifespan=lifespan
)

# CORS configuration
if config.ALLOWED_ORIGINS.strip() == "*":
    cors_origins = ["*"]
else:
    cors_origins = [origin.strip() for origin in config.ALLOWED_ORIGINS.split(",") if origin.strip()]
logger.info("CORS origins: %s", cors_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    # Browsers reject credentialed requests against a wildcard origin
    allow_credentials=cors_origins != ["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

middleware.install(app)

# Include routers
app.include_router(auth.router, prefix="/api")
app.include_router(tasks.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": config.APP_TITLE,
        "version": config.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "task-manager-api",
        "version": config.APP_VERSION,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "todo_api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level=config.LOG_LEVEL.lower()
    )
