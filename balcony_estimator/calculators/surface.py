"""
Wall, ceiling and floor calculator.

One class serves all six surface tabs. `length` is the surface length and
`width` its height, both in mm.

1. Finish (`finishType`): panels by area coverage. Must resolve, with usable dimensions.
2. Battens: every "<tab>:Скрытые" material, by rail spacing. Always listed, hidden=True.
3. Insulation (`insulationType`, optional): area coverage, 1 m² per unit if the
   material has no dimensions.
4. Paint (painting flag == "yes"): every "<tab>:<paint subcategory>" material
   by paint coverage. The floor has no painting step.

A catalog-hidden finish, insulation or paint is costed but not listed.
"""

import logging

from ..models import TabName
from .base import BaseCalculator, CalculationError, TabResult, area_m2, format_amount, is_positive_number

logger = logging.getLogger(__name__)

INVALID_SURFACE_INPUT = "Некорректные размеры или тип отделки"


class SurfaceCalculator(BaseCalculator):

    def __init__(self, lookup, tab: TabName, painting_field: str = None,
                 painting_subcategory: str = None):
        super().__init__(lookup)
        self.tab = tab.value
        self.painting_field = painting_field
        self.painting_subcategory = painting_subcategory

    def calculate(self, data: dict) -> dict:
        length = data.get("length")
        height = data.get("width")
        finish_type = data.get("finishType")

        if (
            not is_positive_number(length)
            or not is_positive_number(height)
            or not finish_type
            or not isinstance(finish_type, str)
        ):
            logger.error(
                "Invalid dimensions or finishType for %s: length=%r height=%r finishType=%r",
                self.tab, length, height, finish_type,
            )
            raise CalculationError(INVALID_SURFACE_INPUT)

        result = TabResult()

        # --- Visible finish ---
        finish = self.resolve_primary(finish_type)
        mat_length, mat_width, _ = self.normalize_dimensions(finish)
        if mat_length <= 0 or mat_width <= 0:
            logger.error("Invalid material dimensions for %r (%s)", finish.name, self.tab)
            raise CalculationError(f'Недопустимые размеры материала "{finish.name}"')

        finish_qty = self.area_coverage_quantity(length, height, mat_length, mat_width)
        finish_cost = finish_qty * finish.price
        result.add(
            self.make_line_item(finish.name, finish_qty, finish.unit, finish_cost, finish.is_hidden),
            finish_cost,
            visible=not finish.is_hidden,
        )

        # --- Battens / fasteners ---
        hidden_category = f"{self.tab}:Скрытые"
        hidden_materials = self.fetch_priced(hidden_category)
        if not hidden_materials:
            logger.warning("No hidden materials found for %r", hidden_category)
        for material in hidden_materials:
            rail_length, _, _ = self.normalize_dimensions(material)
            if not rail_length:
                logger.warning(
                    "Using default rail length %.0fmm for %r",
                    self.RAIL_DEFAULT_LENGTH_MM, material.name,
                )
            rail_qty = self.rail_quantity(length, height, rail_length)
            rail_cost = rail_qty * material.price
            result.add(self.make_line_item(
                material.name, format_amount(rail_qty), material.unit or "шт.", rail_cost, hidden=True,
            ), rail_cost)

        # --- Insulation ---
        insulation_type = data.get("insulationType")
        if insulation_type and isinstance(insulation_type, str):
            insulation = self.resolve_optional(insulation_type, "insulation")
            if insulation is not None:
                ins_length, ins_width, _ = self.normalize_dimensions(insulation)
                ins_qty = self.area_coverage_quantity(
                    length, height, ins_length, ins_width, fallback_area_m2=1.0,
                )
                ins_cost = ins_qty * insulation.price
                result.add(
                    self.make_line_item(insulation.name, ins_qty, insulation.unit, ins_cost, insulation.is_hidden),
                    ins_cost,
                    visible=not insulation.is_hidden,
                )

        # --- Painting ---
        if self.painting_field and data.get(self.painting_field) == "yes":
            paint_area = area_m2(length, height)
            for paint in self.fetch_priced(f"{self.tab}:{self.painting_subcategory}"):
                paint_qty = self.paint_quantity(paint_area)
                paint_cost = paint_qty * paint.price
                result.add(
                    self.make_line_item(paint.name, paint_qty, paint.unit or "л.", paint_cost, paint.is_hidden),
                    paint_cost,
                    visible=not paint.is_hidden,
                )

        self.apply_extra_materials(data, result)
        return result.to_response()
