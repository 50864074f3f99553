"""
Cannibalization summary over category siblings of the promoted products.

Loss accounting is one-directional: only siblings whose revenue variation is
below the "bajo" threshold count as affected, and each affected sibling
contributes max(0, baseline - promo period).  A sibling that grew never
offsets one that declined.
"""

from dataclasses import dataclass
import logging
from typing import Sequence, Tuple

from ..domain.models import CanibalizacionItem
from .thresholds import UMBRALES, Umbrales

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanibalizacionAnalisis:
    """Cannibalization summary (present only when sibling data was supplied)."""
    productos: Tuple[CanibalizacionItem, ...]  # All siblings, as supplied
    total_canibalizacion: float  # Revenue lost by affected siblings (>= 0)
    productos_afectados: int
    impacto_neto: float  # Promo revenue uplift - total_canibalizacion


def analyze_cannibalization(
    sibling_data: Sequence[CanibalizacionItem],
    uplift_promo_abs: float,
    umbrales: Umbrales = UMBRALES,
) -> CanibalizacionAnalisis:
    """
    Summarize category-sibling revenue decline during the promotion.

    Args:
        sibling_data: Sibling products with promo-period vs baseline revenue
        uplift_promo_abs: Absolute revenue uplift of the promoted products
        umbrales: Thresholds (affected = variacion_pct < canibalizacion.bajo)

    Returns:
        CanibalizacionAnalisis
    """
    afectados = [p for p in sibling_data if p.variacion_pct < umbrales.canibalizacion.bajo]
    total = sum(max(0.0, p.venta_baseline - p.venta_periodo_promo) for p in afectados)

    logger.debug(
        f"Cannibalization: {len(afectados)}/{len(sibling_data)} siblings affected, "
        f"lost revenue {total:.2f}"
    )

    return CanibalizacionAnalisis(
        productos=tuple(sibling_data),
        total_canibalizacion=total,
        productos_afectados=len(afectados),
        impacto_neto=uplift_promo_abs - total,
    )
