from .cache import CategoryCache
from .errors import CatalogError, MaterialNotFound
from .lookup import MaterialLookup
from .reference import MaterialRef
from .store import CatalogStore, SqlCatalogStore

__all__ = [
    "CatalogError",
    "CatalogStore",
    "CategoryCache",
    "MaterialLookup",
    "MaterialNotFound",
    "MaterialRef",
    "SqlCatalogStore",
]
