import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "travel.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from app.errors import database_error_handler, unhandled_error_handler, validation_error_handler
from app.routers import about, blog, bookings, contact, destinations, menus, newsletter, reviews, saved_tours, seo, tour_categories, tours

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Make sure the default tour categories exist
    if settings.seed_on_startup:
        try:
            from app.seed import seed
            await seed()
        except Exception as e:
            logger.warning(f"Auto-seed skipped: {e}")

    yield


app = FastAPI(
    title="Silk Road Travel",
    description="Multilingual travel agency site API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(tours.router, prefix="/api/tours", tags=["tours"])
app.include_router(destinations.router, prefix="/api/destinations", tags=["destinations"])
app.include_router(tour_categories.router, prefix="/api/tour-categories", tags=["tour-categories"])
app.include_router(bookings.router, prefix="/api/bookings", tags=["bookings"])
app.include_router(reviews.router, prefix="/api/reviews", tags=["reviews"])
app.include_router(blog.router, prefix="/api/blog", tags=["blog"])
app.include_router(menus.router, prefix="/api/menus", tags=["menus"])
app.include_router(about.router, prefix="/api/about", tags=["about"])
app.include_router(contact.router, prefix="/api/contact", tags=["contact"])
app.include_router(newsletter.router, prefix="/api/newsletter", tags=["newsletter"])
app.include_router(saved_tours.router, prefix="/api/saved-tours", tags=["saved-tours"])
app.include_router(seo.router, prefix="/api", tags=["seo"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": settings.service_name}
