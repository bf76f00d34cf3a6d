"""
Extra materials overlay.

Every tab accepts `extraMaterials`: a free-form list of
{"materialKey": "<id>:<category>:<name>", "quantity": <number>} entries that
are costed on top of the tab's own rules. Bad entries are dropped one by one,
never failing the batch.
"""

import logging
from dataclasses import dataclass, field

from ..catalog import CatalogError, MaterialLookup, MaterialRef
from .base import format_amount, has_price_and_unit, is_positive_number

logger = logging.getLogger(__name__)


@dataclass
class ExtraResult:
    total_cost: float = 0.0
    # All resolved entries, hidden ones included; callers filter for display
    results: list = field(default_factory=list)


def process_extra_materials(lookup: MaterialLookup, extra_materials) -> ExtraResult:
    extra = ExtraResult()

    if not isinstance(extra_materials, list):
        logger.warning("extraMaterials is not a list, skipping: %r", extra_materials)
        return extra

    for entry in extra_materials:
        if not isinstance(entry, dict):
            logger.warning("Invalid extra material entry: %r", entry)
            continue
        material_key = entry.get("materialKey")
        quantity = entry.get("quantity")
        if (
            not isinstance(material_key, str)
            or material_key.strip() == ""
            or not is_positive_number(quantity)
        ):
            logger.warning("Invalid extra material data: key=%r quantity=%r", material_key, quantity)
            continue

        try:
            material = lookup.get_material(MaterialRef.parse(material_key))
        except (ValueError, CatalogError) as e:
            logger.warning("Failed to load extra material %r: %s", material_key, e)
            continue

        if not has_price_and_unit(material):
            logger.warning(
                "Extra material missing price or unit: %r (price=%r, unit=%r)",
                material.name, material.price, material.unit,
            )
            continue

        cost = quantity * material.price
        extra.results.append({
            "material": material.name,
            "quantity": format_amount(quantity),
            "unit": material.unit,
            "cost": format_amount(cost),
            "hidden": material.is_hidden,
        })
        extra.total_cost += cost

    logger.info(
        "Processed %d extra materials (%d resolved), total %s",
        len(extra_materials), len(extra.results), format_amount(extra.total_cost),
    )
    return extra
