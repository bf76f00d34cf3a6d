"""
Estimate engine — entry point for a tab calculation.

Input: tab name + the tab's form data
Output: {"success": True, "results": [...], "totalCost": "123.45"}
        or {"success": False, "error": "<message>"}

compute() always returns one of those two shapes; nothing it calls may escape
as an exception.
"""

import logging
import time

from .calculators.base import CalculationError
from .calculators.registry import get_calculator, has_calculator
from .catalog import CatalogError, MaterialLookup

logger = logging.getLogger(__name__)

INVALID_REQUEST = "tabName и data обязательны и должны быть строкой и объектом соответственно"


def failure(error: str) -> dict:
    return {"success": False, "error": error}


class EstimateEngine:

    def __init__(self, lookup: MaterialLookup):
        self.lookup = lookup

    def compute(self, tab_name, data) -> dict:
        start_time = time.monotonic()

        if not tab_name or not isinstance(tab_name, str) or not isinstance(data, dict):
            logger.error("Missing or invalid tabName or data: tabName=%r data=%r", tab_name, data)
            return failure(INVALID_REQUEST)

        if not has_calculator(tab_name):
            logger.error("Unsupported tab: %r", tab_name)
            return failure(f'Расчет для вкладки "{tab_name}" пока не реализован')

        logger.info("Processing request for tab %r", tab_name)
        try:
            calculator = get_calculator(tab_name, self.lookup)
            result = calculator.calculate(data)
        except CalculationError as e:
            logger.error("Calculation rejected for %r: %s", tab_name, e)
            return failure(str(e))
        except CatalogError as e:
            logger.error("Catalog failure during %r calculation: %s", tab_name, e)
            return failure(str(e))
        except Exception as e:
            logger.exception("Error in calculation for tab %r", tab_name)
            return failure(str(e) or e.__class__.__name__)

        logger.info(
            "Calculation completed for %r: %d results, total %s in %.0fms",
            tab_name, len(result["results"]), result["totalCost"],
            (time.monotonic() - start_time) * 1000,
        )
        return result
