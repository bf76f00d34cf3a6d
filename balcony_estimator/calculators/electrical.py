"""
"Электрика" calculator — cable, switches, sockets, spots.

Each (type, quantity) pair is a fixed-quantity lookup; pairs that are missing
or don't resolve are skipped.
"""

import logging

from ..models import TabName
from .base import BaseCalculator, TabResult, is_positive_number

logger = logging.getLogger(__name__)

ELECTRICAL_ITEMS = [
    ("cableType", "cableQuantity", "Электрика:Кабель"),
    ("switchType", "switchQuantity", "Электрика:Выключатель"),
    ("socketType", "socketQuantity", "Электрика:Розетка"),
    ("spotType", "spotQuantity", "Электрика:Спот"),
]


class ElectricalCalculator(BaseCalculator):

    tab = TabName.ELECTRICAL.value

    def calculate(self, data: dict) -> dict:
        result = TabResult()
        for type_field, quantity_field, category in ELECTRICAL_ITEMS:
            key = data.get(type_field)
            quantity = data.get(quantity_field)
            if not key:
                continue
            if not is_positive_number(quantity):
                logger.warning("Skipping %s: invalid quantity %r", category, quantity)
                continue
            self.add_fixed_item(result, key, quantity, category)

        self.apply_extra_materials(data, result)
        return result.to_response()
