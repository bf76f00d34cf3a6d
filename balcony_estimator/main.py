from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .catalog import CategoryCache
from .config import settings
from .database import engine, Base
from . import models  # noqa: F401  (registers tables)
from .routers import calculate, materials

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("balcony_estimator")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Balcony Estimator",
    description="Material and cost estimation for balcony renovation",
    version="2.0.0"
)

app.state.category_cache = CategoryCache(ttl_seconds=settings.CATEGORY_CACHE_TTL_SECONDS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculate.router, prefix="/api")
app.include_router(materials.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "balcony-estimator"}
