"""
"Доп. параметр" calculator — nothing but the extra materials overlay.
"""

import logging

from ..models import TabName
from .base import BaseCalculator, CalculationError, TabResult

logger = logging.getLogger(__name__)


class ExtraOnlyCalculator(BaseCalculator):

    tab = TabName.EXTRA.value

    def calculate(self, data: dict) -> dict:
        extra_materials = data.get("extraMaterials")
        if not isinstance(extra_materials, list) or len(extra_materials) == 0:
            logger.error("Invalid or empty extraMaterials for tab %r: %r", self.tab, data)
            raise CalculationError(
                'Некорректные данные для вкладки "Доп. параметр": '
                "требуется непустой массив extraMaterials"
            )

        result = TabResult()
        self.apply_extra_materials(data, result)
        return result.to_response()
