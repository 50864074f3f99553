"""
Discount cost and effective price per promotion mechanism.

Cost model (all costs measured against the baseline average price):
- descuento_porcentaje: units × price × pct/100
- precio_especial:      units × max(0, price − special price)
- multicompra_nx1:      complete sets only → floor(units / compra) × (compra − lleva) × price
- multicompra_nxprecio: complete sets only → floor(units / cantidad) × max(0, cantidad × price − set price)
- bundle:               0 (the discount is already embedded in the observed bundle price)

Partial multi-buy sets contribute no cost: the floor policy is conservative and
deliberately not pro-rated.
"""

from typing import Optional

from .models import (
    Bundle,
    DescuentoPorcentaje,
    MulticompraNx1,
    MulticompraNxPrecio,
    PrecioEspecial,
    PromocionConfig,
)


def _precio_conocido(precio: Optional[float]) -> bool:
    """A price is usable only when present and strictly positive."""
    return precio is not None and precio > 0


def compute_discount_cost(
    config: PromocionConfig,
    unidades_vendidas: float,
    precio_baseline: Optional[float],
) -> float:
    """
    Cost of the discount given away during the promotion.

    Args:
        config: Promotion configuration (parameters already validated)
        unidades_vendidas: Units sold during the promotion
        precio_baseline: Average unit price in the baseline window (None = unknown)

    Returns:
        Discount cost in currency units; 0.0 when the baseline price is unknown

    Raises:
        TypeError: If the parameter variant is not a known promotion mechanism
    """
    if not _precio_conocido(precio_baseline):
        return 0.0

    p = config.parametros

    if isinstance(p, DescuentoPorcentaje):
        return unidades_vendidas * precio_baseline * (p.porcentaje / 100)

    if isinstance(p, PrecioEspecial):
        return unidades_vendidas * max(0.0, precio_baseline - p.precio)

    if isinstance(p, MulticompraNx1):
        gratis = p.compra - p.lleva
        sets = int(unidades_vendidas // p.compra)
        return float(sets * gratis * precio_baseline)

    if isinstance(p, MulticompraNxPrecio):
        sets = int(unidades_vendidas // p.cantidad)
        descuento_por_set = p.cantidad * precio_baseline - p.precio
        return sets * max(0.0, descuento_por_set)

    if isinstance(p, Bundle):
        return 0.0

    raise TypeError(f"Unhandled promotion parameters: {type(p).__name__}")


def compute_effective_price(
    config: PromocionConfig,
    precio_baseline: Optional[float],
) -> Optional[float]:
    """
    Effective unit price paid by the shopper under the promotion.

    Mechanisms defined relative to the regular price (percentage, NxM) need a
    known baseline price and return None without one. Fixed-price mechanisms
    return their configured price; a special price is capped at the known
    baseline price, so it never exceeds the regular price.

    Examples:
        >>> compute_effective_price(cfg_20_off, 100.0)
        80.0
        >>> compute_effective_price(cfg_3x2, 30.0)
        20.0
    """
    p = config.parametros

    if isinstance(p, DescuentoPorcentaje):
        if not _precio_conocido(precio_baseline):
            return None
        return precio_baseline * (1 - p.porcentaje / 100)

    if isinstance(p, PrecioEspecial):
        # A "special" price above the regular one is not a discount
        if _precio_conocido(precio_baseline):
            return min(p.precio, precio_baseline)
        return p.precio

    if isinstance(p, MulticompraNx1):
        if not _precio_conocido(precio_baseline):
            return None
        return (p.lleva * precio_baseline) / p.compra

    if isinstance(p, MulticompraNxPrecio):
        return p.precio / p.cantidad

    if isinstance(p, Bundle):
        return p.precio_bundle

    raise TypeError(f"Unhandled promotion parameters: {type(p).__name__}")
