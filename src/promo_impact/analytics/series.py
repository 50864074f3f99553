"""Day-aligned comparison of promo vs baseline daily series (for charts)."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from ..domain.models import VentaDiaria


@dataclass(frozen=True)
class ComparativoDiario:
    dia: int  # 1-based day index within each window
    fecha_promo: Optional[date]
    fecha_baseline: Optional[date]
    venta_promo: float
    venta_baseline: float
    unidades_promo: float
    unidades_baseline: float


def combine_daily_series(
    serie_promo: Sequence[VentaDiaria],
    serie_baseline: Sequence[VentaDiaria],
) -> List[ComparativoDiario]:
    """
    Align two daily series by position (day 1 with day 1, ...).

    The shorter series is padded with zero sales and no date, so the result
    has max(len(promo), len(baseline)) rows.
    """
    rows = []
    for i in range(max(len(serie_promo), len(serie_baseline))):
        promo = serie_promo[i] if i < len(serie_promo) else None
        base = serie_baseline[i] if i < len(serie_baseline) else None
        rows.append(ComparativoDiario(
            dia=i + 1,
            fecha_promo=promo.fecha if promo else None,
            fecha_baseline=base.fecha if base else None,
            venta_promo=promo.venta if promo else 0.0,
            venta_baseline=base.venta if base else 0.0,
            unidades_promo=promo.unidades if promo else 0.0,
            unidades_baseline=base.unidades if base else 0.0,
        ))
    return rows
