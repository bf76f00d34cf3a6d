import re
from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Any, Optional, List, Union
from datetime import datetime

# "<Tab>:<SubCategory>[:...]": at least one colon with text on both sides
CATEGORY_PATTERN = re.compile(r"^[^:]+:[^:]+")
CATEGORY_MAX_LENGTH = 200


def validate_category(category) -> str:
    """Return the category unchanged, or raise ValueError with the reason."""
    if not isinstance(category, str) or category.strip() == "":
        raise ValueError("Each category must be a non-empty string")
    if len(category) > CATEGORY_MAX_LENGTH:
        raise ValueError("Category name must not exceed 200 characters")
    if not CATEGORY_PATTERN.match(category):
        raise ValueError(
            f'Invalid category format: "{category}". Expected format: "TabName:SubCategory"'
        )
    return category


# --- Catalog ---

class Dimensions(BaseModel):
    """Dimensions as stored; missing or zero values mean "not planar/linear"."""
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None


class DimensionsIn(BaseModel):
    length: float = Field(gt=0, le=100_000)
    width: float = Field(gt=0, le=100_000)
    height: Optional[float] = Field(default=None, ge=0, le=100_000)


class MaterialCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    categories: List[str] = Field(min_length=1)
    price: float = Field(ge=0, le=1_000_000)
    quantity: float = Field(ge=0)
    unit: str = Field(min_length=1, max_length=20)
    dimensions: Optional[DimensionsIn] = None
    color: Optional[str] = Field(default=None, max_length=50)
    is_hidden: bool = Field(default=False, validation_alias=AliasChoices("isHidden", "is_hidden"))

    @field_validator("name", "unit")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if v.strip() == "":
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("categories")
    @classmethod
    def check_categories(cls, v: List[str]) -> List[str]:
        return [validate_category(c) for c in v]


class MaterialUpdate(MaterialCreate):
    pass


class Material(BaseModel):
    """A catalog record as the calculators see it."""
    id: str
    name: str
    categories: List[str] = []
    price: Optional[float] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    color: Optional[str] = None
    is_hidden: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_hidden", "isHidden"),
        serialization_alias="isHidden",
    )
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class MaterialPage(BaseModel):
    items: List[Material]
    total: int


class CategoryPage(BaseModel):
    categories: List[str]
    total: int


class MaterialCreated(BaseModel):
    success: bool = True
    material_id: str = Field(serialization_alias="materialId")


# --- Calculation ---

class CalculationRequest(BaseModel):
    # Left untyped so malformed input reaches the engine and gets its error message
    tabName: Any = None
    data: Any = None


class LineItem(BaseModel):
    material: str
    quantity: Union[int, float, str]
    unit: str
    cost: str
    hidden: bool = False


class CalculationResult(BaseModel):
    success: bool
    results: Optional[List[LineItem]] = None
    totalCost: Optional[str] = None
    error: Optional[str] = None


class TabInfo(BaseModel):
    tab: str
    subcategories: List[str]
