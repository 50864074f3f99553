"""Promotion impact analysis for retail sell-out data."""

from .analytics.engine import PromocionResultado, analyze_promotion, resultado_to_dict

__version__ = "1.0.0"

__all__ = [
    "PromocionResultado",
    "analyze_promotion",
    "resultado_to_dict",
    "__version__",
]
