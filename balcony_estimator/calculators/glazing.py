"""
"Остекление" (glazing) calculator.

Eight option slots, costed in this fixed order. Every slot except the window
holds a material reference and costs one unit. The window slot holds a plain
variant name ("Балкон 3м." ...): it is matched by name inside "Остекление:Окно",
costed per window, and pulls its own hidden kit from
"Остекление:Окно:<variant>:Скрытые" (one unit per window).

Slots set to "no" or left empty are skipped. A slot whose material can't be
resolved is skipped with a warning.
"""

import logging

from ..models import TabName
from .base import (
    BaseCalculator, CalculationError, TabResult, format_amount, has_price_and_unit,
    is_positive_number,
)

logger = logging.getLogger(__name__)

WINDOW_CATEGORY = "Остекление:Окно"

WINDOW_VARIANTS = [
    "Балкон 3м.",
    "Балкон 6м.",
    "Лоджия 3м.",
    "Лоджия 6м.",
    "Окно 1.5м. кирпич",
]

GLAZING_OPTIONS = [
    ("glazingType", "Остекление:Что делаем"),
    ("frameType", "Остекление:Основная рама"),
    ("exteriorFinish", "Остекление:Наружная отделка"),
    ("balconyBlock", "Остекление:Замена балконного блока"),
    ("windowType", WINDOW_CATEGORY),
    ("windowSlopes", "Остекление:Откосы для окон"),
    ("sillType", "Остекление:Подоконники"),
    ("roofType", "Остекление:Крыша"),
]


class GlazingCalculator(BaseCalculator):

    tab = TabName.GLAZING.value

    def calculate(self, data: dict) -> dict:
        window_type = data.get("windowType")
        window_quantity = data.get("windowQuantity")

        if not window_type or not is_positive_number(window_quantity):
            logger.error(
                "Invalid data for tab %r: windowType=%r windowQuantity=%r",
                self.tab, window_type, window_quantity,
            )
            raise CalculationError(
                'Некорректные данные для вкладки "Остекление": '
                "требуется windowType и windowQuantity"
            )
        if window_type not in WINDOW_VARIANTS:
            logger.error("Invalid windowType: %r", window_type)
            raise CalculationError(f"Недопустимый вариант окна: {window_type}")

        result = TabResult()
        for field, category in GLAZING_OPTIONS:
            value = data.get(field)
            if not value or value == "no":
                continue
            if category == WINDOW_CATEGORY:
                self._add_window(result, value, window_quantity)
            else:
                self.add_fixed_item(result, value, 1, category)

        self.apply_extra_materials(data, result)
        return result.to_response()

    def _add_window(self, result: TabResult, variant: str, window_quantity: float):
        window = next(
            (m for m in self.lookup.fetch_all(WINDOW_CATEGORY) if m.name == variant), None
        )
        if window is None:
            logger.warning("Material not found for windowType %r in %r", variant, WINDOW_CATEGORY)
            return
        if not has_price_and_unit(window):
            logger.warning("Material missing price or unit: %r (%s)", window.name, WINDOW_CATEGORY)
            return

        cost = window_quantity * window.price
        result.add(
            self.make_line_item(
                window.name, format_amount(window_quantity), window.unit, cost, window.is_hidden,
            ),
            cost,
            visible=not window.is_hidden,
        )

        # Per-variant kit (seals, brackets...). Listed as structurally hidden items.
        for material in self.fetch_priced(f"{WINDOW_CATEGORY}:{variant}:Скрытые"):
            kit_cost = window_quantity * material.price
            result.add(self.make_line_item(
                material.name, format_amount(window_quantity), material.unit or "шт.", kit_cost,
                hidden=True,
            ), kit_cost)
