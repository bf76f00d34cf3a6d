"""
Calculator registry — maps tab names to calculator factories.

Every TabName must have an entry; a missing one fails at import time rather
than surfacing as "unsupported tab" for a real tab.
"""

from functools import partial

from ..catalog import MaterialLookup
from ..models import TabName
from .base import BaseCalculator
from .electrical import ElectricalCalculator
from .extra_only import ExtraOnlyCalculator
from .furniture import FurnitureCalculator
from .glazing import GlazingCalculator
from .move_in import MoveInCalculator
from .surface import SurfaceCalculator

CALCULATOR_REGISTRY: dict = {
    TabName.MAIN_WALL: partial(SurfaceCalculator, tab=TabName.MAIN_WALL,
                               painting_field="wallPainting", painting_subcategory="Покраска стен"),
    TabName.FACADE_WALL: partial(SurfaceCalculator, tab=TabName.FACADE_WALL,
                                 painting_field="wallPainting", painting_subcategory="Покраска стен"),
    TabName.BL_WALL: partial(SurfaceCalculator, tab=TabName.BL_WALL,
                             painting_field="wallPainting", painting_subcategory="Покраска стен"),
    TabName.BP_WALL: partial(SurfaceCalculator, tab=TabName.BP_WALL,
                             painting_field="wallPainting", painting_subcategory="Покраска стен"),
    TabName.CEILING: partial(SurfaceCalculator, tab=TabName.CEILING,
                             painting_field="ceilingPainting", painting_subcategory="Покраска потолка"),
    TabName.FLOOR: partial(SurfaceCalculator, tab=TabName.FLOOR),
    TabName.MOVE_IN: MoveInCalculator,
    TabName.GLAZING: GlazingCalculator,
    TabName.ELECTRICAL: ElectricalCalculator,
    TabName.FURNITURE: FurnitureCalculator,
    TabName.EXTRA: ExtraOnlyCalculator,
}

_missing = [tab.value for tab in TabName if tab not in CALCULATOR_REGISTRY]
if _missing:
    raise RuntimeError(f"No calculator registered for tabs: {_missing}")


def get_calculator(tab_name: str, lookup: MaterialLookup) -> BaseCalculator:
    """Returns a calculator bound to `lookup` for a tab, or raises ValueError."""
    try:
        tab = TabName(tab_name)
    except ValueError:
        raise ValueError(
            f"No calculator registered for tab: {tab_name}. "
            f"Available: {list_calculators()}"
        ) from None
    return CALCULATOR_REGISTRY[tab](lookup)


def has_calculator(tab_name) -> bool:
    """Check if a calculator exists for a tab name."""
    return any(tab_name == tab.value for tab in CALCULATOR_REGISTRY)


def list_calculators() -> list[str]:
    """List all registered tab names."""
    return [tab.value for tab in CALCULATOR_REGISTRY]
