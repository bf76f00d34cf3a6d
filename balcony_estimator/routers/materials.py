import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
from .. import schemas
from ..catalog import MaterialNotFound, SqlCatalogStore
from ..config import settings
from ..deps import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("/categories", response_model=schemas.CategoryPage)
def list_categories(
    page: int = Query(0, ge=0),
    page_size: int = Query(settings.ITEMS_PER_PAGE, gt=0, alias="pageSize"),
    store: SqlCatalogStore = Depends(get_store),
):
    return store.list_categories(page, page_size)


@router.get("", response_model=schemas.MaterialPage)
def list_materials(
    category: Optional[str] = None,
    page: int = Query(0, ge=0),
    page_size: int = Query(settings.ITEMS_PER_PAGE, gt=0, alias="pageSize"),
    store: SqlCatalogStore = Depends(get_store),
):
    return store.list(category, page, page_size)


@router.get("/{material_id}", response_model=schemas.Material)
def get_material(material_id: str, store: SqlCatalogStore = Depends(get_store)):
    material = store.get(material_id)
    if material is None:
        raise HTTPException(status_code=404, detail="Material not found")
    return material


@router.post("", response_model=schemas.MaterialCreated, status_code=201)
def add_material(data: schemas.MaterialCreate, store: SqlCatalogStore = Depends(get_store)):
    material = store.add(data)
    return {"success": True, "material_id": material.id}


@router.put("/{material_id}", response_model=schemas.Material)
def edit_material(material_id: str, data: schemas.MaterialUpdate,
                  store: SqlCatalogStore = Depends(get_store)):
    try:
        return store.edit(material_id, data)
    except MaterialNotFound:
        raise HTTPException(status_code=404, detail="Material not found")


@router.delete("/{material_id}")
def delete_material(material_id: str, store: SqlCatalogStore = Depends(get_store)):
    try:
        store.delete(material_id)
    except MaterialNotFound:
        raise HTTPException(status_code=404, detail="Material not found")
    return {"success": True}
