"""
Interpretation thresholds for promotion metrics.

A single immutable structure consumed by the cannibalization, retention and
insight modules.  Defaults can be overridden from settings.json:

    {
      "promo_thresholds": {
        "uplift_excelente": {"value": 25},
        "retencion_buena": {"value": 0.45}
      }
    }
"""
from dataclasses import dataclass, field, fields, replace
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

SETTINGS_SECTION = "promo_thresholds"


@dataclass(frozen=True)
class UmbralesUplift:
    """Sales uplift, % vs baseline."""
    excelente: float = 30.0
    bueno: float = 10.0
    neutral: float = 0.0  # below → negative


@dataclass(frozen=True)
class UmbralesRoi:
    """ROI, %."""
    excelente: float = 100.0
    bueno: float = 50.0
    aceptable: float = 0.0  # below → loss


@dataclass(frozen=True)
class UmbralesElasticidad:
    """Absolute price elasticity."""
    muy_elastico: float = 2.0
    elastico: float = 1.0


@dataclass(frozen=True)
class UmbralesCanibalizacion:
    """Sibling revenue variation, % (negative = decline)."""
    alto: float = -15.0
    medio: float = -10.0
    bajo: float = -5.0  # above → no significant impact


@dataclass(frozen=True)
class UmbralesRetencion:
    """Post-promo daily revenue / during-promo daily revenue."""
    excelente: float = 0.7
    buena: float = 0.5
    regular: float = 0.3


@dataclass(frozen=True)
class UmbralesEvaluacion:
    """Overall verdict."""
    uplift_negativo: float = -10.0  # uplift below this → "negativa"


@dataclass(frozen=True)
class Umbrales:
    uplift: UmbralesUplift = field(default_factory=UmbralesUplift)
    roi: UmbralesRoi = field(default_factory=UmbralesRoi)
    elasticidad: UmbralesElasticidad = field(default_factory=UmbralesElasticidad)
    canibalizacion: UmbralesCanibalizacion = field(default_factory=UmbralesCanibalizacion)
    retencion: UmbralesRetencion = field(default_factory=UmbralesRetencion)
    evaluacion: UmbralesEvaluacion = field(default_factory=UmbralesEvaluacion)


UMBRALES = Umbrales()


def load_umbrales(settings: Dict[str, Any]) -> Umbrales:
    """
    Build thresholds from settings, falling back to defaults per key.

    Keys are "<group>_<name>" (e.g. "roi_bueno", "elasticidad_muy_elastico").
    Unknown keys and non-numeric values are ignored with a warning.

    Args:
        settings: Global settings dict (settings.json contents)

    Returns:
        Umbrales instance
    """
    section = settings.get(SETTINGS_SECTION, {})
    if not section:
        return UMBRALES

    groups = {}
    for grupo in fields(Umbrales):
        defaults = getattr(UMBRALES, grupo.name)
        overrides = {}
        for umbral in fields(defaults):
            key = f"{grupo.name}_{umbral.name}"
            if key not in section:
                continue
            entry = section[key]
            value = entry.get("value") if isinstance(entry, dict) else entry
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                logger.warning(f"Ignoring non-numeric threshold {key}={value!r}")
                continue
            overrides[umbral.name] = float(value)
        groups[grupo.name] = replace(defaults, **overrides) if overrides else defaults

    known = {f"{g.name}_{u.name}" for g in fields(Umbrales) for u in fields(getattr(UMBRALES, g.name))}
    for key in section:
        if key not in known:
            logger.warning(f"Unknown threshold key in settings: {key}")

    return Umbrales(**groups)
