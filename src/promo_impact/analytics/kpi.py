"""
KPI calculation for promotion impact (promo window vs baseline window).

Headline metrics:
- Sales / units uplift (absolute and %)
- Real discount observed in average prices
- Discount cost, incremental revenue and ROI
- Price elasticity (% units change / % price change)
- Store coverage

Zero-safe conventions (no NaN/Infinity ever leaves this module):
- % change with a zero base is 0% when the current value is also zero,
  otherwise 100% ("started from nothing").
- Metrics that need a price on both sides are None when either price is unknown.
- ROI is None when the discount cost is zero.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..domain.models import ProductoVentas, PromocionConfig, VentasPeriodo
from ..domain.pricing import compute_discount_cost


@dataclass(frozen=True)
class PromocionKpis:
    """Headline KPIs of a promotion analysis run."""
    # Sales
    venta_promo: float
    venta_baseline: float
    venta_diferencia_abs: float
    venta_diferencia_pct: float  # Uplift %

    # Units
    unidades_promo: float
    unidades_baseline: float
    unidades_diferencia_abs: float
    unidades_diferencia_pct: float

    # Price
    precio_promedio_promo: Optional[float]
    precio_promedio_baseline: Optional[float]
    descuento_real_pct: Optional[float]

    # ROI
    costo_descuento: float
    ingreso_incremental: float
    roi: Optional[float]  # (incremental revenue - cost) / cost * 100

    elasticidad_precio: Optional[float]

    # Stores
    tiendas_con_venta_promo: int
    tiendas_con_venta_baseline: int
    tiendas_totales: int
    cobertura_pct: float

    # Days with sales
    dias_promo: int
    dias_baseline: int


@dataclass(frozen=True)
class ProductoPromocionAnalisis:
    """Uplift and elasticity of a single product present in the promo window."""
    producto_id: int
    producto_nombre: str
    upc: str
    categoria: str

    venta_promo: float
    venta_baseline: float
    uplift_pct: float

    unidades_promo: float
    unidades_baseline: float
    uplift_unidades_pct: float

    precio_promo: Optional[float]
    precio_baseline: Optional[float]

    elasticidad: Optional[float]
    contribucion_total: float  # % of total promo revenue


def pct_change(actual: float, base: float) -> float:
    """
    Percentage change of `actual` vs `base`, zero-safe.

    Returns:
        (actual - base) / base * 100; with base == 0: 0.0 if actual == 0 else 100.0
    """
    if base != 0:
        return (actual - base) / base * 100
    return 0.0 if actual == 0 else 100.0


def price_change_pct(precio_actual: Optional[float], precio_base: Optional[float]) -> Optional[float]:
    """% price change, None unless both prices are known and positive."""
    if not precio_actual or not precio_base or precio_actual <= 0 or precio_base <= 0:
        return None
    return (precio_actual - precio_base) / precio_base * 100


def elasticity(unidades_pct: float, cambio_precio_pct: Optional[float]) -> Optional[float]:
    """% units change / % price change. None without a non-zero price change."""
    if cambio_precio_pct is None or cambio_precio_pct == 0:
        return None
    return unidades_pct / cambio_precio_pct


def compute_kpis(
    config: PromocionConfig,
    promo: VentasPeriodo,
    baseline: VentasPeriodo,
) -> PromocionKpis:
    """
    Compute headline KPIs of the promotion vs baseline.

    Args:
        config: Promotion configuration (drives the discount cost model)
        promo: Sales during the promotion window
        baseline: Sales during the baseline window

    Returns:
        PromocionKpis
    """
    tp = promo.totales
    tb = baseline.totales

    venta_diferencia_abs = tp.venta_total - tb.venta_total
    venta_diferencia_pct = pct_change(tp.venta_total, tb.venta_total)

    unidades_diferencia_abs = tp.unidades_total - tb.unidades_total
    unidades_diferencia_pct = pct_change(tp.unidades_total, tb.unidades_total)

    cambio_precio_pct = price_change_pct(tp.precio_promedio, tb.precio_promedio)
    descuento_real_pct = -cambio_precio_pct if cambio_precio_pct is not None else None

    costo_descuento = compute_discount_cost(config, tp.unidades_total, tb.precio_promedio)
    ingreso_incremental = venta_diferencia_abs
    roi = (
        (ingreso_incremental - costo_descuento) / costo_descuento * 100
        if costo_descuento > 0
        else None
    )

    tiendas_totales = max(tp.tiendas_con_venta, tb.tiendas_con_venta)
    cobertura_pct = tp.tiendas_con_venta / tiendas_totales * 100 if tiendas_totales > 0 else 0.0

    return PromocionKpis(
        venta_promo=tp.venta_total,
        venta_baseline=tb.venta_total,
        venta_diferencia_abs=venta_diferencia_abs,
        venta_diferencia_pct=venta_diferencia_pct,
        unidades_promo=tp.unidades_total,
        unidades_baseline=tb.unidades_total,
        unidades_diferencia_abs=unidades_diferencia_abs,
        unidades_diferencia_pct=unidades_diferencia_pct,
        precio_promedio_promo=tp.precio_promedio,
        precio_promedio_baseline=tb.precio_promedio,
        descuento_real_pct=descuento_real_pct,
        costo_descuento=costo_descuento,
        ingreso_incremental=ingreso_incremental,
        roi=roi,
        elasticidad_precio=elasticity(unidades_diferencia_pct, cambio_precio_pct),
        tiendas_con_venta_promo=tp.tiendas_con_venta,
        tiendas_con_venta_baseline=tb.tiendas_con_venta,
        tiendas_totales=tiendas_totales,
        cobertura_pct=cobertura_pct,
        dias_promo=tp.dias_con_venta,
        dias_baseline=tb.dias_con_venta,
    )


def compute_per_product(
    promo: VentasPeriodo,
    baseline: VentasPeriodo,
) -> List[ProductoPromocionAnalisis]:
    """
    Per-product uplift for every product sold during the promotion.

    Baseline-only products are not emitted: the table answers "how did the
    products sold under promotion move".  A promo product absent from the
    baseline is compared against 0 sales / 0 units / unknown price.

    Args:
        promo: Sales during the promotion window
        baseline: Sales during the baseline window

    Returns:
        One ProductoPromocionAnalisis per promo-window product, in input order
    """
    baseline_map: Dict[int, ProductoVentas] = {p.producto_id: p for p in baseline.por_producto}
    total_venta_promo = promo.totales.venta_total

    resultado = []
    for prod in promo.por_producto:
        base = baseline_map.get(prod.producto_id)
        venta_baseline = base.venta if base is not None else 0.0
        unidades_baseline = base.unidades if base is not None else 0.0
        precio_baseline = base.precio_promedio if base is not None else None

        uplift_unidades_pct = pct_change(prod.unidades, unidades_baseline)
        contribucion = prod.venta / total_venta_promo * 100 if total_venta_promo > 0 else 0.0

        resultado.append(ProductoPromocionAnalisis(
            producto_id=prod.producto_id,
            producto_nombre=prod.producto_nombre,
            upc=prod.upc,
            categoria=prod.categoria,
            venta_promo=prod.venta,
            venta_baseline=venta_baseline,
            uplift_pct=pct_change(prod.venta, venta_baseline),
            unidades_promo=prod.unidades,
            unidades_baseline=unidades_baseline,
            uplift_unidades_pct=uplift_unidades_pct,
            precio_promo=prod.precio_promedio,
            precio_baseline=precio_baseline,
            elasticidad=elasticity(
                uplift_unidades_pct,
                price_change_pct(prod.precio_promedio, precio_baseline),
            ),
            contribucion_total=contribucion,
        ))

    return resultado
