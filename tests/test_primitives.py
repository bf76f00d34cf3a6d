"""
Shared quantity primitives on BaseCalculator.

Tests:
1-4.   Area coverage (finish / insulation)
5-8.   Rail spacing (battens)
9.     Paint coverage
10-12. Numeric validation, formatting, result accumulation
"""

import math

import pytest

from balcony_estimator.calculators.base import (
    TabResult, area_m2, format_amount, is_positive_number,
)
from balcony_estimator.calculators.extra_only import ExtraOnlyCalculator


@pytest.fixture
def calc(lookup):
    return ExtraOnlyCalculator(lookup)  # Use concrete subclass


# ============================================================
# Area coverage
# ============================================================

def test_area_coverage_panel_example(calc):
    """3000×2500mm wall, 600×300mm panels: ceil(7.5 / 0.18 × 1.10) = ceil(45.83) = 46."""
    assert area_m2(3000, 2500) == pytest.approx(7.5)
    assert area_m2(600, 300) == pytest.approx(0.18)
    assert calc.area_coverage_quantity(3000, 2500, 600, 300) == 46


def test_area_coverage_always_rounds_up(calc):
    """Even a sliver over a whole panel costs a whole panel."""
    # 1 m² wall, 1 m² panel: 1 × 1.1 = 1.1 → 2
    assert calc.area_coverage_quantity(1000, 1000, 1000, 1000) == 2
    # 2 m² wall, 0.72 m² slabs: 2.777 × 1.1 = 3.06 → 4
    assert calc.area_coverage_quantity(2000, 1000, 1200, 600) == 4


def test_area_coverage_rejects_material_without_area(calc):
    with pytest.raises(ValueError):
        calc.area_coverage_quantity(3000, 2500, 0, 300)


def test_area_coverage_fallback_area(calc):
    """Insulation without dimensions counts 1 m² per unit: ceil(7.5 × 1.1) = 9."""
    assert calc.area_coverage_quantity(3000, 2500, 0, 0, fallback_area_m2=1.0) == 9


# ============================================================
# Rails
# ============================================================

def test_rail_quantity_default_length(calc):
    """3000×2500mm wall, default 3m rail: 6 columns × 1 rail × 1.05 = 6.3."""
    quantity = calc.rail_quantity(3000, 2500)
    assert quantity == pytest.approx(6.3)
    assert format_amount(quantity) == "6.30"


def test_rail_quantity_short_rails_stack(calc):
    """2m rails on a 2.5m wall need two per column: ceil(3/0.5)=6 × 2 × 1.05 = 12.6."""
    assert calc.rail_quantity(3000, 2500, 2000) == pytest.approx(12.6)
    # Odd length: ceil(3.1/0.5) = 7 columns
    assert calc.rail_quantity(3100, 2500, 3000) == pytest.approx(7 * 1 * 1.05)


@pytest.mark.parametrize("height_mm,rail_mm,rails_per_column", [
    (2100, 700, 3),
    (2100, 300, 7),
    (2700, 300, 9),
    (4200, 600, 7),
    (4900, 700, 7),
    (3000, 3000, 1),
])
def test_rail_quantity_exact_multiples_no_extra_rail(calc, height_mm, rail_mm, rails_per_column):
    """A wall exactly N rails tall needs N rails per column, not N+1."""
    assert calc.rail_quantity(3000, height_mm, rail_mm) == pytest.approx(6 * rails_per_column * 1.05)


def test_rail_quantity_exact_length_multiple(calc):
    """3.5m wall at 0.5m spacing: exactly 7 columns."""
    assert calc.rail_quantity(3500, 2500, 3000) == pytest.approx(7 * 1 * 1.05)


# ============================================================
# Paint
# ============================================================

def test_paint_quantity_rounds_up(calc):
    assert calc.paint_quantity(7.5) == 1
    assert calc.paint_quantity(10.0) == 1
    assert calc.paint_quantity(25.0) == 3


# ============================================================
# Helpers
# ============================================================

@pytest.mark.parametrize("value,expected", [
    (1, True),
    (0.5, True),
    (3000, True),
    (0, False),
    (-1, False),
    (math.nan, False),
    (math.inf, False),
    (True, False),
    ("5", False),
    (None, False),
])
def test_is_positive_number(value, expected):
    assert is_positive_number(value) is expected


def test_format_amount_two_decimals():
    assert format_amount(6.300000000000001) == "6.30"
    assert format_amount(46) == "46.00"
    assert format_amount(0) == "0.00"


def test_tab_result_counts_hidden_cost_without_listing():
    """Catalog-hidden items go into the total but not into results."""
    result = TabResult()
    result.add({"material": "Панель"}, 100.0)
    result.add({"material": "Саморезы"}, 25.5, visible=False)
    response = result.to_response()
    assert response == {
        "success": True,
        "results": [{"material": "Панель"}],
        "totalCost": "125.50",
    }
