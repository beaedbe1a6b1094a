import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import reviews

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report the active configuration on startup."""
    logger.info(
        "Starting up: model=%s, review_mode=%s", settings.model_name, settings.review_mode.value
    )
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set; review requests will be rejected.")
    yield
    logger.info("Shutting down.")


app = FastAPI(
    title="Review Writer",
    description="Turns a few business details into a short, positive review using Claude.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reviews.router)


@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "ok", "version": "1.0.0"}
