"""
Catalog stores.

CatalogStore is the contract the calculation engine needs: fetch one record by
id and list a category page by page. SqlCatalogStore backs it with the
`materials` tables and also carries catalog management (add/edit/delete).
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Session

from .. import models, schemas
from .cache import CategoryCache
from .errors import MaterialNotFound

logger = logging.getLogger(__name__)


def check_pagination(page, page_size):
    if not isinstance(page, int) or page < 0 or not isinstance(page_size, int) or page_size <= 0:
        raise ValueError(
            "Invalid pagination parameters: page must be >= 0 and page_size must be positive"
        )


class CatalogStore(ABC):
    """Read access to the material catalog."""

    @abstractmethod
    def get(self, material_id: str) -> Optional[schemas.Material]:
        """Return the material, or None if no record has this id."""

    @abstractmethod
    def list(self, category: Optional[str], page: int, page_size: int) -> schemas.MaterialPage:
        """Return one page of materials tagged with `category` (all materials if None)."""


class SqlCatalogStore(CatalogStore):

    def __init__(self, db: Session, cache: CategoryCache):
        self.db = db
        self.cache = cache

    # --- Reads ---

    def get(self, material_id: str) -> Optional[schemas.Material]:
        if not material_id or not isinstance(material_id, str):
            raise ValueError("Key must be a non-empty string")
        row = self.db.get(models.Material, material_id)
        if row is None:
            logger.warning("Material not found: %s", material_id)
            return None
        return schemas.Material.model_validate(row)

    def list(self, category: Optional[str], page: int, page_size: int) -> schemas.MaterialPage:
        check_pagination(page, page_size)
        if category is not None and not isinstance(category, str):
            raise ValueError("Category must be a string")

        query = self.db.query(models.Material)
        if category:
            query = query.join(models.MaterialCategory).filter(
                models.MaterialCategory.category == category
            )
        total = query.count()
        rows = (
            query.order_by(models.Material.id)
            .offset(page * page_size)
            .limit(page_size)
            .all()
        )
        logger.debug("Fetched %d/%d materials for %r page %d", len(rows), total, category, page)
        return schemas.MaterialPage(
            items=[schemas.Material.model_validate(r) for r in rows],
            total=total,
        )

    def list_categories(self, page: int, page_size: int) -> schemas.CategoryPage:
        """Distinct category tags across the catalog, sorted, served through the cache."""
        check_pagination(page, page_size)
        start_time = time.monotonic()
        try:
            categories, source = self.cache.get_or_load(self._load_categories)
        except Exception:
            self.cache.invalidate()
            raise
        logger.info(
            "Categories fetched from %s: %d total in %.0fms",
            source, len(categories), (time.monotonic() - start_time) * 1000,
        )
        start = page * page_size
        return schemas.CategoryPage(
            categories=categories[start:start + page_size],
            total=len(categories),
        )

    def _load_categories(self) -> list:
        rows = self.db.query(models.MaterialCategory.category).distinct().all()
        return sorted(r[0] for r in rows)

    # --- Writes (each one clears the category cache) ---

    def add(self, data: schemas.MaterialCreate) -> schemas.Material:
        try:
            row = models.Material()
            self._apply(row, data)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        finally:
            self.cache.invalidate()
        logger.info("Material added: %s (%s)", row.id, row.name)
        return schemas.Material.model_validate(row)

    def edit(self, material_id: str, data: schemas.MaterialUpdate) -> schemas.Material:
        try:
            row = self.db.get(models.Material, material_id)
            if row is None:
                raise MaterialNotFound(material_id)
            row.category_links.clear()
            self.db.flush()
            self._apply(row, data)
            self.db.commit()
            self.db.refresh(row)
        finally:
            self.cache.invalidate()
        logger.info("Material updated: %s (%s)", row.id, row.name)
        return schemas.Material.model_validate(row)

    def delete(self, material_id: str):
        try:
            row = self.db.get(models.Material, material_id)
            if row is None:
                raise MaterialNotFound(material_id)
            name = row.name
            self.db.delete(row)
            self.db.commit()
        finally:
            self.cache.invalidate()
        logger.info("Material deleted: %s (%s)", material_id, name)

    def _apply(self, row: models.Material, data: schemas.MaterialCreate):
        row.name = data.name
        row.price = data.price
        row.quantity = data.quantity
        row.unit = data.unit
        row.color = data.color
        row.is_hidden = data.is_hidden
        dims = data.dimensions
        row.length_mm = dims.length if dims else None
        row.width_mm = dims.width if dims else None
        row.height_mm = dims.height if dims else None
        # Duplicate tags collapse; order is kept for display
        for position, category in enumerate(dict.fromkeys(data.categories)):
            row.category_links.append(
                models.MaterialCategory(category=category, position=position)
            )
