"""
Abstract base class for all tab calculators.

Input: the tab's `data` dict as posted by the UI
Output: {"success": True, "results": [LineItem...], "totalCost": "0.00"}

Geometry arrives in millimetres; every area is converted to m² before use.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from ..catalog import CatalogError, MaterialLookup, MaterialRef
from ..config import settings
from .. import schemas

logger = logging.getLogger(__name__)

MISSING_PRICE_OR_UNIT = "У материала отсутствует цена или единица измерения"


class CalculationError(ValueError):
    """Terminal failure of a tab calculation. The message is shown to the customer."""


def is_positive_number(value) -> bool:
    """True for finite int/float > 0. Booleans and numeric strings don't count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def has_price_and_unit(material: schemas.Material) -> bool:
    return bool(material.price) and bool(material.unit)


def format_amount(value: float) -> str:
    return f"{value:.2f}"


def area_m2(length_mm: float, width_mm: float) -> float:
    return (length_mm * width_mm) / 1_000_000


class TabResult:
    """Accumulates line items and the running total for one calculation."""

    def __init__(self):
        self.results = []
        self.total_cost = 0.0

    def add(self, item: dict, cost: float, visible: bool = True):
        """Count `cost` in the total; list the item only if visible."""
        if visible:
            self.results.append(item)
        self.total_cost += cost

    def to_response(self) -> dict:
        return {
            "success": True,
            "results": self.results,
            "totalCost": format_amount(self.total_cost),
        }


class BaseCalculator(ABC):
    """All tab calculators inherit from this."""

    WASTE_FACTOR = settings.WASTE_FACTOR
    RAIL_WASTE_FACTOR = settings.RAIL_WASTE_FACTOR
    RAIL_STEP_M = settings.RAIL_STEP_M
    RAIL_DEFAULT_LENGTH_MM = settings.RAIL_DEFAULT_LENGTH_MM
    PAINT_COVERAGE_M2 = settings.PAINT_COVERAGE_M2

    tab: str = ""

    def __init__(self, lookup: MaterialLookup):
        self.lookup = lookup

    @abstractmethod
    def calculate(self, data: dict) -> dict:
        """
        Takes the tab's form data.
        Returns the success response dict, or raises CalculationError.
        """
        pass

    # --- Quantity primitives ---

    def area_coverage_quantity(self, room_length_mm: float, room_width_mm: float,
                               material_length_mm: float, material_width_mm: float,
                               fallback_area_m2: Optional[float] = None) -> int:
        """
        Panels needed to cover the room area, plus waste. Always rounds UP.
        A material without area raises ValueError unless fallback_area_m2 is given.
        """
        room_area = area_m2(room_length_mm, room_width_mm)
        material_area = area_m2(material_length_mm, material_width_mm)
        if material_area <= 0:
            if fallback_area_m2 is None:
                raise ValueError("material area must be positive")
            material_area = fallback_area_m2
        return math.ceil((room_area / material_area) * self.WASTE_FACTOR)

    def rail_quantity(self, room_length_mm: float, room_height_mm: float,
                      rail_length_mm: Optional[float] = None) -> float:
        """
        Battens: one column every RAIL_STEP_M along the length, enough rails
        stacked to reach the height, plus waste. Not rounded.
        """
        # Divide in mm: exact multiples must not pick up a float ulp before ceil
        rail_length_mm = rail_length_mm or self.RAIL_DEFAULT_LENGTH_MM
        rail_step_mm = round(self.RAIL_STEP_M * 1000)
        horizontal_count = math.ceil(room_length_mm / rail_step_mm)
        vertical_count = math.ceil(room_height_mm / rail_length_mm)
        return horizontal_count * vertical_count * self.RAIL_WASTE_FACTOR

    def paint_quantity(self, area: float) -> int:
        """Paint units for an area in m². Always rounds UP."""
        return math.ceil(area / self.PAINT_COVERAGE_M2)

    def normalize_dimensions(self, material: schemas.Material) -> tuple:
        """(length, width, height) in mm; zeros when missing or unusable."""
        dims = material.dimensions
        if dims is None:
            logger.warning("Dimensions missing for material %r", material.name)
            return 0.0, 0.0, 0.0
        if not dims.length or not dims.width:
            logger.warning("Invalid dimensions for material %r: %s", material.name, dims)
            return 0.0, 0.0, 0.0
        return float(dims.length), float(dims.width), float(dims.height or 0.0)

    # --- Output ---

    def make_line_item(self, material: str, quantity, unit: str, cost: float,
                       hidden: bool = False) -> dict:
        """Build a LineItem dict. Cost is always formatted to 2 decimals."""
        return {
            "material": material,
            "quantity": quantity,
            "unit": unit,
            "cost": format_amount(cost),
            "hidden": hidden,
        }

    # --- Catalog access ---

    def resolve_primary(self, key: str) -> schemas.Material:
        """
        Resolve the material the customer explicitly picked.
        Anything wrong with it fails the whole calculation.
        """
        try:
            ref = MaterialRef.parse(key)
        except ValueError as e:
            logger.error("Bad primary material key in %s: %s", self.tab, e)
            raise CalculationError("Material not found") from e
        material = self.lookup.get_material(ref)
        if not has_price_and_unit(material):
            logger.error("Material missing price or unit: %r (%s)", material.name, self.tab)
            raise CalculationError(MISSING_PRICE_OR_UNIT)
        return material

    def resolve_optional(self, key, category: str = "") -> Optional[schemas.Material]:
        """
        Resolve an ancillary material. Returns None (with a warning) instead of
        failing when the key, the record or its price/unit is unusable.
        """
        try:
            ref = MaterialRef.parse(key)
            material = self.lookup.get_material(ref)
        except (ValueError, CatalogError) as e:
            logger.warning("Failed to load material %r for %s %s: %s", key, self.tab, category, e)
            return None
        if not has_price_and_unit(material):
            logger.warning("Material missing price or unit: %r (%s %s)", material.name, self.tab, category)
            return None
        return material

    def fetch_priced(self, category: str) -> list:
        """All materials of a category that have a price. CatalogError propagates."""
        priced = []
        for material in self.lookup.fetch_all(category):
            if not material.price:
                logger.warning("Material missing price: %r (%s)", material.name, category)
                continue
            priced.append(material)
        return priced

    # --- Shared tab steps ---

    def add_fixed_item(self, result: TabResult, key, quantity: float, category: str = ""):
        """Fixed-quantity lookup: cost = declared quantity × unit price."""
        material = self.resolve_optional(key, category)
        if material is None:
            return
        cost = quantity * material.price
        item = self.make_line_item(
            material.name, format_amount(quantity), material.unit, cost, material.is_hidden
        )
        result.add(item, cost, visible=not material.is_hidden)

    def add_category_items(self, result: TabResult, category: str):
        """
        Cost every material of a category at its catalog quantity (1 if unset).
        Catalog-hidden materials are costed but not listed.
        """
        materials = self.fetch_priced(category)
        if not materials:
            logger.warning("No materials found for %r", category)
        for material in materials:
            quantity = material.quantity or 1
            cost = quantity * material.price
            item = self.make_line_item(
                material.name, format_amount(quantity), material.unit or "шт.", cost,
                material.is_hidden,
            )
            result.add(item, cost, visible=not material.is_hidden)

    def apply_extra_materials(self, data: dict, result: TabResult):
        """Merge the free-form extraMaterials overlay into the tab result."""
        extra_materials = data.get("extraMaterials")
        if extra_materials is None:
            return
        from .extras import process_extra_materials
        extra = process_extra_materials(self.lookup, extra_materials)
        for item in extra.results:
            if not item["hidden"]:
                result.results.append(item)
        result.total_cost += extra.total_cost
