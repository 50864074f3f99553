"""
Post-promotion retention: does the daily run-rate survive the promotion?
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..domain.models import VentaDiaria, VentasPeriodo
from .thresholds import UMBRALES, Umbrales


class InterpretacionRetencion(Enum):
    EXCELENTE = "excelente"
    BUENA = "buena"
    REGULAR = "regular"
    BAJA = "baja"


@dataclass(frozen=True)
class RetencionAnalisis:
    """Retention summary (present only when a post-promo window was supplied)."""
    dias_analisis: int
    venta_promedio_durante_promo: float
    venta_promedio_post_promo: float
    venta_promedio_baseline: float

    indice_retencion: float    # post-promo / during promo
    indice_vs_baseline: float  # post-promo / baseline

    ventas_diarias_post_promo: Tuple[VentaDiaria, ...]
    interpretacion: InterpretacionRetencion


def daily_average(ventas: VentasPeriodo) -> float:
    """Revenue per day with sales; 0.0 when the window had no selling days."""
    dias = ventas.totales.dias_con_venta
    return ventas.totales.venta_total / dias if dias > 0 else 0.0


def classify_retention(indice: float, umbrales: Umbrales = UMBRALES) -> InterpretacionRetencion:
    """Bucket a retention index (boundaries inclusive on the lower edge)."""
    r = umbrales.retencion
    if indice >= r.excelente:
        return InterpretacionRetencion.EXCELENTE
    if indice >= r.buena:
        return InterpretacionRetencion.BUENA
    if indice >= r.regular:
        return InterpretacionRetencion.REGULAR
    return InterpretacionRetencion.BAJA


def analyze_retention(
    promo: VentasPeriodo,
    baseline: VentasPeriodo,
    post_promo: Optional[VentasPeriodo],
    dias_analisis: int,
    umbrales: Umbrales = UMBRALES,
) -> Optional[RetencionAnalisis]:
    """
    Compare the post-promotion daily run-rate with the promo and baseline ones.

    Args:
        promo: Sales during the promotion
        baseline: Sales during the baseline
        post_promo: Sales after the promotion, or None (analysis skipped)
        dias_analisis: Length of the post-promo window (config.dias_post_promo)
        umbrales: Thresholds for the qualitative bucket

    Returns:
        RetencionAnalisis, or None when no post-promo data was supplied
    """
    if post_promo is None:
        return None

    durante = daily_average(promo)
    post = daily_average(post_promo)
    base = daily_average(baseline)

    indice_retencion = post / durante if durante > 0 else 0.0
    indice_vs_baseline = post / base if base > 0 else 0.0

    return RetencionAnalisis(
        dias_analisis=dias_analisis,
        venta_promedio_durante_promo=durante,
        venta_promedio_post_promo=post,
        venta_promedio_baseline=base,
        indice_retencion=indice_retencion,
        indice_vs_baseline=indice_vs_baseline,
        ventas_diarias_post_promo=post_promo.serie_diaria,
        interpretacion=classify_retention(indice_retencion, umbrales),
    )
