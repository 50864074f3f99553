"""
Promotion impact analysis: single entry point assembling every component.

Pipeline:
    compute_kpis()
        → compute_per_product()
            → analyze_cannibalization()   (only with sibling data)
                → analyze_retention()     (only with post-promo data)
                    → generate_insights() → evaluate()
                        → PromocionResultado

Every stage is a pure function of its inputs; calling analyze_promotion twice
with the same inputs returns equal results.
"""

from dataclasses import dataclass, fields, is_dataclass
from datetime import date
from enum import Enum
import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from ..domain.models import CanibalizacionItem, PromocionConfig, VentasPeriodo
from ..domain.periods import baseline_length_warning
from .cannibalization import CanibalizacionAnalisis, analyze_cannibalization
from .insights import EvaluacionGeneral, PromocionInsight, evaluate, generate_insights
from .kpi import ProductoPromocionAnalisis, PromocionKpis, compute_kpis, compute_per_product
from .retention import RetencionAnalisis, analyze_retention
from .thresholds import UMBRALES, Umbrales

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromocionResultado:
    """Complete analysis output."""
    config: PromocionConfig
    kpis: PromocionKpis
    por_producto: Tuple[ProductoPromocionAnalisis, ...]
    canibalizacion: Optional[CanibalizacionAnalisis]
    retencion: Optional[RetencionAnalisis]
    insights: Tuple[PromocionInsight, ...]
    evaluacion_general: EvaluacionGeneral


def analyze_promotion(
    config: PromocionConfig,
    promo: VentasPeriodo,
    baseline: VentasPeriodo,
    post_promo: Optional[VentasPeriodo] = None,
    sibling_data: Optional[Sequence[CanibalizacionItem]] = None,
    umbrales: Umbrales = UMBRALES,
) -> PromocionResultado:
    """
    Analyze the impact of a promotion.

    Args:
        config: Validated promotion configuration
        promo: Sales during the promotion window
        baseline: Sales during the baseline window
        post_promo: Sales in the retention window (None → no retention analysis)
        sibling_data: Category siblings (None → no cannibalization analysis;
                      an empty list is analyzed and reports no cannibalization)
        umbrales: Interpretation thresholds

    Returns:
        PromocionResultado

    Raises:
        TypeError: If config is not a PromocionConfig or its parameters are of
                   an unknown mechanism.  Invalid configurations cannot be
                   built at all (PromocionConfig raises ValueError).
    """
    if not isinstance(config, PromocionConfig):
        raise TypeError(f"config must be a PromocionConfig, got {type(config).__name__}")

    aviso = baseline_length_warning(config.fecha_inicio_baseline, config.fecha_fin_baseline)
    if aviso:
        logger.warning(aviso)

    kpis = compute_kpis(config, promo, baseline)
    logger.debug(
        f"KPIs: uplift={kpis.venta_diferencia_pct:.2f}% cost={kpis.costo_descuento:.2f} "
        f"roi={kpis.roi} elasticity={kpis.elasticidad_precio}"
    )

    por_producto = compute_per_product(promo, baseline)

    canibalizacion = (
        analyze_cannibalization(sibling_data, kpis.venta_diferencia_abs, umbrales)
        if sibling_data is not None
        else None
    )

    retencion = analyze_retention(promo, baseline, post_promo, config.dias_post_promo, umbrales)

    insights = generate_insights(kpis, canibalizacion, retencion, umbrales)
    evaluacion = evaluate(kpis, insights, umbrales)

    logger.info(
        f"Promotion {config.tipo.value} on {len(config.producto_ids)} product(s) "
        f"{config.fecha_inicio_promo}..{config.fecha_fin_promo}: {evaluacion.value} "
        f"({len(insights)} insights)"
    )

    return PromocionResultado(
        config=config,
        kpis=kpis,
        por_producto=tuple(por_producto),
        canibalizacion=canibalizacion,
        retencion=retencion,
        insights=tuple(insights),
        evaluacion_general=evaluacion,
    )


# ============================================================
# Serialization (presentation layer / CLI)
# ============================================================

def _to_jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        data = {f.name: _to_jsonable(getattr(value, f.name)) for f in fields(value)}
        tipo = getattr(type(value), "tipo", None)
        if isinstance(tipo, Enum) and "tipo" not in data:
            # Promotion parameter variants carry their tag at class level
            data = {"tipo": tipo.value, **data}
        return data
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


def resultado_to_dict(resultado: PromocionResultado) -> Dict[str, Any]:
    """
    JSON-ready representation of a result.

    Enums become their values, dates ISO strings, tuples lists; optional
    sections stay None.  Formatting (currency, locale) is left to the caller.
    """
    return _to_jsonable(resultado)
