"""
"На заезд" (move-in) calculator.

Three yes/no toggles, each pulling a whole catalog category at its stock
quantity: the move-in list, fasteners and tiling supplies.
"""

import logging

from ..models import TabName
from .base import BaseCalculator, CalculationError, TabResult

logger = logging.getLogger(__name__)

MOVE_IN_TOGGLES = [
    ("entryListToggle", "На заезд:Список на заезд"),
    ("entryFastenersToggle", "На заезд:Крепеж"),
    ("entryTilingToggle", "На заезд:Плиточные работы"),
]


class MoveInCalculator(BaseCalculator):

    tab = TabName.MOVE_IN.value

    def calculate(self, data: dict) -> dict:
        if any(not isinstance(data.get(field), str) for field, _ in MOVE_IN_TOGGLES):
            logger.error("Invalid data for tab %r: %r", self.tab, data)
            raise CalculationError('Некорректные данные для вкладки "На заезд"')

        result = TabResult()
        for field, category in MOVE_IN_TOGGLES:
            if data[field] == "yes":
                self.add_category_items(result, category)

        self.apply_extra_materials(data, result)
        return result.to_response()
