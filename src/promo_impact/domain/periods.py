"""
Analysis window helpers: baseline auto-selection, baseline length check and
post-promo retention window.
"""
from datetime import date, timedelta
from typing import Optional, Tuple

from ..config import DIAS_BASELINE_MINIMO, DIAS_BASELINE_RECOMENDADO, DIAS_RETENCION_DEFAULT


def days_in_window(inicio: date, fin: date) -> int:
    """Inclusive day count of [inicio, fin]; 0 if the window is inverted."""
    if fin < inicio:
        return 0
    return (fin - inicio).days + 1


def baseline_window_for(inicio_promo: date, fin_promo: date) -> Tuple[date, date]:
    """
    Baseline of the same length immediately preceding the promotion.

    Example:
        Promo 2025-03-10..2025-03-16 (7 days) → baseline 2025-03-03..2025-03-09
    """
    if inicio_promo > fin_promo:
        raise ValueError(f"Promo start {inicio_promo} is after promo end {fin_promo}")

    dias_promo = days_in_window(inicio_promo, fin_promo)
    fin_baseline = inicio_promo - timedelta(days=1)
    inicio_baseline = fin_baseline - timedelta(days=dias_promo - 1)
    return inicio_baseline, fin_baseline


def post_promo_window(fin_promo: date, dias_post_promo: Optional[int] = None) -> Tuple[date, date]:
    """
    Retention window starting the day after the promotion ends.

    Args:
        fin_promo: Last promo day
        dias_post_promo: Window length; falsy values fall back to DIAS_RETENCION_DEFAULT

    Returns:
        (first_day, last_day) inclusive
    """
    dias = dias_post_promo or DIAS_RETENCION_DEFAULT
    if dias < 0:
        raise ValueError(f"dias_post_promo must not be negative, got {dias}")
    return fin_promo + timedelta(days=1), fin_promo + timedelta(days=dias)


def baseline_length_warning(inicio_baseline: date, fin_baseline: date) -> Optional[str]:
    """Warning text when the baseline is too short to be representative, else None."""
    dias = days_in_window(inicio_baseline, fin_baseline)
    if dias < DIAS_BASELINE_MINIMO:
        return (
            f"El baseline tiene {dias} días (mínimo {DIAS_BASELINE_MINIMO}, "
            f"recomendado {DIAS_BASELINE_RECOMENDADO})"
        )
    return None
