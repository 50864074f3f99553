"""Analytics package for promotion impact metrics, insights and verdict."""

from .thresholds import (
    Umbrales,
    UMBRALES,
    load_umbrales,
)
from .kpi import (
    PromocionKpis,
    ProductoPromocionAnalisis,
    compute_kpis,
    compute_per_product,
)
from .cannibalization import CanibalizacionAnalisis, analyze_cannibalization
from .retention import InterpretacionRetencion, RetencionAnalisis, analyze_retention
from .insights import (
    EvaluacionGeneral,
    PromocionInsight,
    TipoInsight,
    evaluate,
    generate_insights,
)
from .engine import PromocionResultado, analyze_promotion, resultado_to_dict
from .series import ComparativoDiario, combine_daily_series

__all__ = [
    "Umbrales",
    "UMBRALES",
    "load_umbrales",
    "PromocionKpis",
    "ProductoPromocionAnalisis",
    "compute_kpis",
    "compute_per_product",
    "CanibalizacionAnalisis",
    "analyze_cannibalization",
    "InterpretacionRetencion",
    "RetencionAnalisis",
    "analyze_retention",
    "EvaluacionGeneral",
    "PromocionInsight",
    "TipoInsight",
    "evaluate",
    "generate_insights",
    "PromocionResultado",
    "analyze_promotion",
    "resultado_to_dict",
    "ComparativoDiario",
    "combine_daily_series",
]
