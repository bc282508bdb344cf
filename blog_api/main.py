import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.config import settings
from blog_api.database import engine
from blog_api.exception_handlers import install_exception_handlers
from blog_api.logging_config import setup_logging
from blog_api.middleware import TimingMiddleware
from blog_api.routers import articles, comments

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    logger.info("Blog API %s starting (env=%s)", VERSION, settings.APP_ENV)
    yield
    # Shutdown
    await engine.dispose()

app = FastAPI(
    title="Blog Management API",
    description="Articles and their comments, managed as one aggregate",
    version=VERSION,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

# Routers
app.include_router(articles.router)
app.include_router(comments.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}
