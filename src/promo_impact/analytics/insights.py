"""
Automatic insights and overall verdict for a promotion analysis.

Rules run in a fixed order (uplift → ROI → elasticity → cannibalization →
retention).  Each rule compares one metric against the thresholds and emits
at most one insight; a metric inside the neutral band emits nothing, so the
list is additive rather than exhaustive.

User-facing texts are in Spanish, as shown by the dashboard.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from .cannibalization import CanibalizacionAnalisis
from .kpi import PromocionKpis
from .retention import InterpretacionRetencion, RetencionAnalisis
from .thresholds import UMBRALES, Umbrales


class TipoInsight(Enum):
    POSITIVO = "positivo"
    NEGATIVO = "negativo"
    NEUTRAL = "neutral"


class EvaluacionGeneral(Enum):
    EXITOSA = "exitosa"
    NEUTRAL = "neutral"
    NEGATIVA = "negativa"


@dataclass(frozen=True)
class PromocionInsight:
    """One qualitative observation, optionally tied to the metric that triggered it."""
    tipo: TipoInsight
    titulo: str
    descripcion: str
    metrica: Optional[str] = None
    valor: Optional[str] = None  # Display value, e.g. "+42.5%"


INTERPRETACIONES = {
    "uplift": {
        "excelente": "Incremento excepcional de ventas",
        "bueno": "Buen incremento de ventas",
        "neutral": "Incremento moderado",
        "negativo": "Las ventas disminuyeron durante la promoción",
    },
    "roi": {
        "excelente": "Promoción muy rentable",
        "bueno": "Promoción rentable",
        "aceptable": "Promoción sin pérdida",
        "negativo": "Promoción generó pérdida",
    },
    "elasticidad": {
        "muy_elastico": "Demanda muy sensible al precio",
        "elastico": "Demanda sensible al precio",
        "inelastico": "Demanda poco sensible al precio",
    },
    "canibalizacion": {
        "alto": "Alto riesgo de canibalización",
        "medio": "Canibalización moderada detectada",
        "bajo": "Canibalización mínima",
        "ninguno": "Sin canibalización significativa",
    },
    "retencion": {
        "excelente": "Excelente retención post-promoción",
        "buena": "Buena retención de clientes",
        "regular": "Retención moderada",
        "baja": "Baja retención, efecto solo durante promoción",
    },
    "general": {
        "exitosa": "La promoción fue exitosa con buen ROI y uplift significativo",
        "neutral": "Resultados mixtos, la promoción tuvo impacto limitado",
        "negativa": "La promoción no generó los resultados esperados",
    },
}


# ============================================================
# Rules
# ============================================================

def _insight_uplift(kpis: PromocionKpis, umbrales: Umbrales) -> Optional[PromocionInsight]:
    uplift = kpis.venta_diferencia_pct
    textos = INTERPRETACIONES["uplift"]

    if uplift >= umbrales.uplift.excelente:
        return PromocionInsight(
            TipoInsight.POSITIVO, "Uplift excepcional", textos["excelente"],
            "Uplift", f"+{uplift:.1f}%",
        )
    if uplift >= umbrales.uplift.bueno:
        return PromocionInsight(
            TipoInsight.POSITIVO, "Buen incremento de ventas", textos["bueno"],
            "Uplift", f"+{uplift:.1f}%",
        )
    if uplift < umbrales.uplift.neutral:
        return PromocionInsight(
            TipoInsight.NEGATIVO, "Ventas por debajo del baseline", textos["negativo"],
            "Uplift", f"{uplift:.1f}%",
        )
    return None


def _insight_roi(kpis: PromocionKpis, umbrales: Umbrales) -> Optional[PromocionInsight]:
    roi = kpis.roi
    if roi is None:
        return None
    textos = INTERPRETACIONES["roi"]

    if roi >= umbrales.roi.excelente:
        return PromocionInsight(
            TipoInsight.POSITIVO, "ROI muy positivo", textos["excelente"], "ROI", f"+{roi:.0f}%",
        )
    if roi >= umbrales.roi.bueno:
        return PromocionInsight(
            TipoInsight.POSITIVO, "Promoción rentable", textos["bueno"], "ROI", f"+{roi:.0f}%",
        )
    if roi < umbrales.roi.aceptable:
        return PromocionInsight(
            TipoInsight.NEGATIVO, "ROI negativo", textos["negativo"], "ROI", f"{roi:.0f}%",
        )
    return None


def _insight_elasticidad(kpis: PromocionKpis, umbrales: Umbrales) -> Optional[PromocionInsight]:
    e = kpis.elasticidad_precio
    if e is None:
        return None
    textos = INTERPRETACIONES["elasticidad"]

    if abs(e) >= umbrales.elasticidad.muy_elastico:
        return PromocionInsight(
            TipoInsight.NEUTRAL, "Alta sensibilidad al precio", textos["muy_elastico"],
            "Elasticidad", f"{e:.2f}",
        )
    if abs(e) >= umbrales.elasticidad.elastico:
        return PromocionInsight(
            TipoInsight.NEUTRAL, "Demanda elástica", textos["elastico"],
            "Elasticidad", f"{e:.2f}",
        )
    return None


def _insight_canibalizacion(
    kpis: PromocionKpis,
    canibalizacion: CanibalizacionAnalisis,
    umbrales: Umbrales,
) -> Optional[PromocionInsight]:
    textos = INTERPRETACIONES["canibalizacion"]

    if canibalizacion.productos_afectados == 0:
        return PromocionInsight(TipoInsight.POSITIVO, "Sin canibalización", textos["ninguno"])

    # Lost sibling revenue relative to the promoted products' baseline revenue
    impacto_pct = (
        canibalizacion.total_canibalizacion / kpis.venta_baseline * 100
        if kpis.venta_baseline > 0
        else 0.0
    )

    if impacto_pct > abs(umbrales.canibalizacion.alto):
        return PromocionInsight(
            TipoInsight.NEGATIVO,
            "Canibalización detectada",
            f"{canibalizacion.productos_afectados} productos de la categoría mostraron caída",
            "Canibalización",
            f"-{impacto_pct:.1f}%",
        )
    if impacto_pct > abs(umbrales.canibalizacion.bajo):
        return PromocionInsight(
            TipoInsight.NEUTRAL, "Canibalización menor", textos["bajo"],
            "Canibalización", f"-{impacto_pct:.1f}%",
        )
    return None


_TIPO_POR_RETENCION = {
    InterpretacionRetencion.EXCELENTE: TipoInsight.POSITIVO,
    InterpretacionRetencion.BUENA: TipoInsight.POSITIVO,
    InterpretacionRetencion.REGULAR: TipoInsight.NEUTRAL,
    InterpretacionRetencion.BAJA: TipoInsight.NEGATIVO,
}


def _insight_retencion(retencion: RetencionAnalisis) -> PromocionInsight:
    interpretacion = retencion.interpretacion
    return PromocionInsight(
        _TIPO_POR_RETENCION[interpretacion],
        f"Retención {interpretacion.value}",
        INTERPRETACIONES["retencion"][interpretacion.value],
        "Retención",
        f"{retencion.indice_retencion * 100:.0f}%",
    )


KPI_RULES: Sequence[Callable[[PromocionKpis, Umbrales], Optional[PromocionInsight]]] = (
    _insight_uplift,
    _insight_roi,
    _insight_elasticidad,
)


def generate_insights(
    kpis: PromocionKpis,
    canibalizacion: Optional[CanibalizacionAnalisis] = None,
    retencion: Optional[RetencionAnalisis] = None,
    umbrales: Umbrales = UMBRALES,
) -> List[PromocionInsight]:
    """
    Map computed metrics to qualitative insights.

    Args:
        kpis: Headline KPIs
        canibalizacion: Cannibalization summary, or None when not computed
        retencion: Retention summary, or None when not computed
        umbrales: Thresholds

    Returns:
        Insights in rule order (uplift, ROI, elasticity, cannibalization, retention)
    """
    insights = []
    for rule in KPI_RULES:
        insight = rule(kpis, umbrales)
        if insight is not None:
            insights.append(insight)

    if canibalizacion is not None:
        insight = _insight_canibalizacion(kpis, canibalizacion, umbrales)
        if insight is not None:
            insights.append(insight)

    if retencion is not None:
        insights.append(_insight_retencion(retencion))

    return insights


def evaluate(
    kpis: PromocionKpis,
    insights: Sequence[PromocionInsight],
    umbrales: Umbrales = UMBRALES,
) -> EvaluacionGeneral:
    """
    Overall verdict.

    Precedence is fixed:
    1. EXITOSA: uplift > 0, ROI known and > 0, more positive than negative insights
    2. NEGATIVA: more negative than positive insights, or uplift below -10%
    3. NEUTRAL otherwise
    """
    positivos = sum(1 for i in insights if i.tipo == TipoInsight.POSITIVO)
    negativos = sum(1 for i in insights if i.tipo == TipoInsight.NEGATIVO)

    uplift_positivo = kpis.venta_diferencia_pct > 0
    roi_positivo = kpis.roi is not None and kpis.roi > 0

    if uplift_positivo and roi_positivo and positivos > negativos:
        return EvaluacionGeneral.EXITOSA
    if negativos > positivos or kpis.venta_diferencia_pct < umbrales.evaluacion.uplift_negativo:
        return EvaluacionGeneral.NEGATIVA
    return EvaluacionGeneral.NEUTRAL
