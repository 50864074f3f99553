"""
Tests for post-promotion retention (src/promo_impact/analytics/retention.py).
"""

import pytest
from datetime import date

from promo_impact.analytics.retention import (
    InterpretacionRetencion,
    analyze_retention,
    classify_retention,
    daily_average,
)
from promo_impact.analytics.thresholds import Umbrales, UmbralesRetencion
from promo_impact.domain.models import VentaDiaria, VentasPeriodo, VentasTotales


def _ventas(venta_total, dias_con_venta, serie=()) -> VentasPeriodo:
    return VentasPeriodo(
        totales=VentasTotales(
            venta_total=venta_total,
            unidades_total=0,
            dias_con_venta=dias_con_venta,
        ),
        serie_diaria=serie,
    )


class TestClassifyRetention:
    """Bucket boundaries are inclusive on the lower edge."""

    @pytest.mark.parametrize("indice,esperado", [
        (1.2, InterpretacionRetencion.EXCELENTE),
        (0.70, InterpretacionRetencion.EXCELENTE),
        (0.6999, InterpretacionRetencion.BUENA),
        (0.5, InterpretacionRetencion.BUENA),
        (0.4999, InterpretacionRetencion.REGULAR),
        (0.3, InterpretacionRetencion.REGULAR),
        (0.2999, InterpretacionRetencion.BAJA),
        (0.0, InterpretacionRetencion.BAJA),
    ])
    def test_boundaries(self, indice, esperado):
        assert classify_retention(indice) is esperado

    def test_custom_thresholds(self):
        umbrales = Umbrales(retencion=UmbralesRetencion(excelente=0.9, buena=0.8, regular=0.6))
        assert classify_retention(0.75, umbrales) is InterpretacionRetencion.REGULAR


class TestAnalyzeRetention:
    """Daily run-rate comparison."""

    def test_without_post_promo(self):
        assert analyze_retention(_ventas(70000, 7), _ventas(35000, 7), None, 14) is None

    def test_excellent_retention(self):
        """10000/day during promo, 7000/day after → 0.70 → excelente."""
        serie = (VentaDiaria(fecha=date(2025, 3, 17), venta=7000, unidades=70),)
        resultado = analyze_retention(
            promo=_ventas(70000, 7),
            baseline=_ventas(35000, 7),
            post_promo=_ventas(98000, 14, serie),
            dias_analisis=14,
        )

        assert resultado.venta_promedio_durante_promo == pytest.approx(10000)
        assert resultado.venta_promedio_post_promo == pytest.approx(7000)
        assert resultado.venta_promedio_baseline == pytest.approx(5000)
        assert resultado.indice_retencion == pytest.approx(0.7)
        assert resultado.indice_vs_baseline == pytest.approx(1.4)
        assert resultado.interpretacion is InterpretacionRetencion.EXCELENTE
        assert resultado.dias_analisis == 14
        assert resultado.ventas_diarias_post_promo == serie

    def test_low_retention(self):
        resultado = analyze_retention(_ventas(70000, 7), _ventas(35000, 7), _ventas(14000, 14), 14)
        assert resultado.indice_retencion == pytest.approx(0.1)
        assert resultado.interpretacion is InterpretacionRetencion.BAJA

    def test_zero_selling_days(self):
        """No selling days anywhere → indices 0, no division error."""
        resultado = analyze_retention(_ventas(0, 0), _ventas(0, 0), _ventas(0, 0), 14)
        assert resultado.indice_retencion == 0
        assert resultado.indice_vs_baseline == 0
        assert resultado.interpretacion is InterpretacionRetencion.BAJA


def test_daily_average():
    assert daily_average(_ventas(700, 7)) == pytest.approx(100)
    assert daily_average(_ventas(700, 0)) == 0.0
