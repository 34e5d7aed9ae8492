"""
Fixed linear unit conversions (length, weight, temperature, volume).

This is a closed table, not a unit graph: each conversion is a named
function, and every inverse divides by the same factor its forward
conversion multiplies by, so ft_to_m(m_to_ft(x)) == x up to Decimal precision.

Usage:
    from plainly.app.utils.unit_conversion import convert_units, m_to_ft

    m_to_ft(Decimal("1"))                                   # Decimal('3.28084')
    convert_units("temperature", "c_to_f", 100).result      # Decimal('212')
"""
from decimal import Decimal
from types import MappingProxyType

from plainly.app.schemas.conversions import ConversionResult, UnitCategory
from plainly.app.utils.decimal_utils import Number, to_decimal
from plainly.app.utils.validation_utils import OutOfRangeError, within_decimal_range

M_TO_FT = Decimal("3.28084")
KM_TO_MI = Decimal("0.621371")
CM_TO_IN = Decimal("0.393701")
KG_TO_LB = Decimal("2.20462")
G_TO_OZ = Decimal("0.035274")
L_TO_GAL = Decimal("0.264172")
ML_TO_OZ = Decimal("0.033814")
KELVIN_OFFSET = Decimal("273.15")


# Length
def m_to_ft(m: Decimal) -> Decimal:
    return m * M_TO_FT


def ft_to_m(ft: Decimal) -> Decimal:
    return ft / M_TO_FT


def km_to_mi(km: Decimal) -> Decimal:
    return km * KM_TO_MI


def mi_to_km(mi: Decimal) -> Decimal:
    return mi / KM_TO_MI


def cm_to_in(cm: Decimal) -> Decimal:
    return cm * CM_TO_IN


def in_to_cm(inches: Decimal) -> Decimal:
    return inches / CM_TO_IN


# Weight
def kg_to_lb(kg: Decimal) -> Decimal:
    return kg * KG_TO_LB


def lb_to_kg(lb: Decimal) -> Decimal:
    return lb / KG_TO_LB


def g_to_oz(g: Decimal) -> Decimal:
    return g * G_TO_OZ


def oz_to_g(oz: Decimal) -> Decimal:
    return oz / G_TO_OZ


# Temperature
def c_to_f(c: Decimal) -> Decimal:
    return c * 9 / 5 + 32


def f_to_c(f: Decimal) -> Decimal:
    return (f - 32) * 5 / 9


def c_to_k(c: Decimal) -> Decimal:
    return c + KELVIN_OFFSET


def k_to_c(k: Decimal) -> Decimal:
    return k - KELVIN_OFFSET


# Volume
def l_to_gal(liters: Decimal) -> Decimal:
    return liters * L_TO_GAL


def gal_to_l(gal: Decimal) -> Decimal:
    return gal / L_TO_GAL


def ml_to_oz(ml: Decimal) -> Decimal:
    return ml * ML_TO_OZ


def oz_to_ml(oz: Decimal) -> Decimal:
    return oz / ML_TO_OZ


UNIT_CONVERSIONS = MappingProxyType({
    UnitCategory.LENGTH: MappingProxyType({
        "m_to_ft": m_to_ft,
        "ft_to_m": ft_to_m,
        "km_to_mi": km_to_mi,
        "mi_to_km": mi_to_km,
        "cm_to_in": cm_to_in,
        "in_to_cm": in_to_cm,
        }),
    UnitCategory.WEIGHT: MappingProxyType({
        "kg_to_lb": kg_to_lb,
        "lb_to_kg": lb_to_kg,
        "g_to_oz": g_to_oz,
        "oz_to_g": oz_to_g,
        }),
    UnitCategory.TEMPERATURE: MappingProxyType({
        "c_to_f": c_to_f,
        "f_to_c": f_to_c,
        "c_to_k": c_to_k,
        "k_to_c": k_to_c,
        }),
    UnitCategory.VOLUME: MappingProxyType({
        "l_to_gal": l_to_gal,
        "gal_to_l": gal_to_l,
        "ml_to_oz": ml_to_oz,
        "oz_to_ml": oz_to_ml,
        }),
    })


def list_conversions() -> dict[UnitCategory, list[str]]:
    """Conversion ids available per category, in table order."""
    return {category: list(table) for category, table in UNIT_CONVERSIONS.items()}


@within_decimal_range
def convert_units(category: UnitCategory, conversion: str, value: Number) -> ConversionResult:
    """
    Look up a conversion in the fixed table and apply it.

    The result is not rounded; presentation decides the displayed precision.

    Raises:
        OutOfRangeError: If the category or conversion id is unknown
    """
    try:
        category = UnitCategory(category)
    except ValueError:
        raise OutOfRangeError(f"Unknown unit category: {category!r}", field="category")

    table = UNIT_CONVERSIONS[category]
    if conversion not in table:
        raise OutOfRangeError(
            f"Unknown {category.value} conversion {conversion!r}. Available: {', '.join(table)}",
            field="conversion"
            )

    value = to_decimal(value, "value")
    return ConversionResult(category=category, conversion=conversion, value=value, result=table[conversion](value))
