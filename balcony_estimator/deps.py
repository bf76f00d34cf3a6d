"""
FastAPI dependencies wiring the catalog and the engine per request.

The category cache lives on app.state (one per app) so tests can swap it.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .catalog import CategoryCache, MaterialLookup, SqlCatalogStore
from .config import settings
from .database import get_db
from .estimate_engine import EstimateEngine


def get_category_cache(request: Request) -> CategoryCache:
    return request.app.state.category_cache


def get_store(db: Session = Depends(get_db),
              cache: CategoryCache = Depends(get_category_cache)) -> SqlCatalogStore:
    return SqlCatalogStore(db, cache)


def get_lookup(store: SqlCatalogStore = Depends(get_store)) -> MaterialLookup:
    return MaterialLookup(store, page_size=settings.ITEMS_PER_PAGE)


def get_engine(lookup: MaterialLookup = Depends(get_lookup)) -> EstimateEngine:
    return EstimateEngine(lookup)
