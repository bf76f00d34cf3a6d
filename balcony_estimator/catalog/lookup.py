"""
Material lookup used by the calculators.

Wraps a CatalogStore so calculators don't need to know where materials live:
single records by reference, and complete category listings (fetch-all).
"""

import logging
from typing import Union

from .. import schemas
from ..config import settings
from .errors import CatalogError, MaterialNotFound
from .reference import MaterialRef
from .store import CatalogStore

logger = logging.getLogger(__name__)


class MaterialLookup:

    def __init__(self, store: CatalogStore, page_size: int = None):
        self.store = store
        self.page_size = page_size or settings.ITEMS_PER_PAGE

    def get_material(self, ref: Union[MaterialRef, str]) -> schemas.Material:
        """
        Resolve a reference (or bare id) to its catalog record.
        Raises MaterialNotFound, or CatalogError if the store fails.
        """
        material_id = ref.material_id if isinstance(ref, MaterialRef) else ref
        try:
            material = self.store.get(material_id)
        except CatalogError:
            raise
        except Exception as e:
            raise CatalogError(f"Failed to load material {material_id}: {e}") from e
        if material is None:
            raise MaterialNotFound(material_id)
        return material

    def fetch_all(self, category: str) -> list:
        """
        Every material tagged with `category`.
        Pages through the store until a page comes back shorter than page_size.
        Any failing page aborts the whole fetch with CatalogError.
        """
        page = 0
        materials = []
        while True:
            try:
                result = self.store.list(category, page, self.page_size)
            except Exception as e:
                logger.error("Error fetching materials for %r page %d: %s", category, page, e)
                raise CatalogError(
                    f'Failed to load materials for category "{category}": {e}'
                ) from e
            materials.extend(result.items)
            if len(result.items) < self.page_size:
                break
            page += 1

        logger.info("Loaded %d materials for category %r", len(materials), category)
        return materials
