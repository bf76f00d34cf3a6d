"""
"Мебель" (furniture) calculator.

- Body, top shelves and bottom shelves: fixed-quantity lookups. The body
  quantity defaults to 1 when the form doesn't send one.
- furniturePainting == "yes": every "Мебель:Покраска мебели" material, one unit each.
- stoveSide / countertop toggles: whole category at catalog quantity, like "На заезд".
"""

import logging

from ..models import TabName
from .base import BaseCalculator, TabResult, is_positive_number

logger = logging.getLogger(__name__)

FURNITURE_ITEMS = [
    ("furnitureMaterial", "furnitureQuantity", "Мебель:Материал мебели"),
    ("shelfTopMaterial", "shelfTopQuantity", "Мебель:Полки Верх"),
    ("shelfBottomMaterial", "shelfBottomQuantity", "Мебель:Полки Низ"),
]

FURNITURE_PAINT_CATEGORY = "Мебель:Покраска мебели"

FURNITURE_TOGGLES = [
    ("stoveSide", "Мебель:Бок у печки"),
    ("countertop", "Мебель:Столешница"),
]


class FurnitureCalculator(BaseCalculator):

    tab = TabName.FURNITURE.value

    def calculate(self, data: dict) -> dict:
        result = TabResult()

        for material_field, quantity_field, category in FURNITURE_ITEMS:
            key = data.get(material_field)
            if not key:
                continue
            quantity = data.get(quantity_field)
            if quantity is None and material_field == "furnitureMaterial":
                quantity = 1
            if not is_positive_number(quantity):
                logger.warning("Skipping %s: invalid quantity %r", category, quantity)
                continue
            self.add_fixed_item(result, key, quantity, category)

        if data.get("furniturePainting") == "yes":
            for paint in self.fetch_priced(FURNITURE_PAINT_CATEGORY):
                paint_qty = 1
                paint_cost = paint_qty * paint.price
                result.add(
                    self.make_line_item(paint.name, paint_qty, paint.unit or "л.", paint_cost, paint.is_hidden),
                    paint_cost,
                    visible=not paint.is_hidden,
                )

        for field, category in FURNITURE_TOGGLES:
            if data.get(field) == "yes":
                self.add_category_items(result, category)

        self.apply_extra_materials(data, result)
        return result.to_response()
