"""
Tests for domain models (src/promo_impact/domain/models.py).

Validates fail-fast construction: parameter ranges, tag/type mismatch,
date ordering and retention window length.
"""

import pytest
from datetime import date

from promo_impact.domain.models import (
    Bundle,
    DescuentoPorcentaje,
    MulticompraNx1,
    MulticompraNxPrecio,
    PrecioEspecial,
    PromocionConfig,
    TipoPromocion,
    VentasPeriodo,
    VentasTotales,
)


def _config(**overrides) -> PromocionConfig:
    kwargs = dict(
        producto_ids=[101, 102],
        tipo=TipoPromocion.DESCUENTO_PORCENTAJE,
        parametros=DescuentoPorcentaje(porcentaje=20),
        fecha_inicio_promo=date(2025, 3, 10),
        fecha_fin_promo=date(2025, 3, 16),
        fecha_inicio_baseline=date(2025, 2, 1),
        fecha_fin_baseline=date(2025, 2, 28),
    )
    kwargs.update(overrides)
    return PromocionConfig(**kwargs)


class TestParametros:
    """Parameter variants reject out-of-range values."""

    @pytest.mark.parametrize("porcentaje", [-1, 100.5])
    def test_percentage_out_of_range(self, porcentaje):
        with pytest.raises(ValueError):
            DescuentoPorcentaje(porcentaje=porcentaje)

    def test_percentage_bounds_accepted(self):
        assert DescuentoPorcentaje(porcentaje=0).porcentaje == 0
        assert DescuentoPorcentaje(porcentaje=100).porcentaje == 100

    @pytest.mark.parametrize("precio", [0, -3])
    def test_special_price_must_be_positive(self, precio):
        with pytest.raises(ValueError):
            PrecioEspecial(precio=precio)

    @pytest.mark.parametrize("compra,lleva", [(2, 2), (1, 2), (3, 0)])
    def test_nx1_requires_compra_greater_than_lleva(self, compra, lleva):
        with pytest.raises(ValueError):
            MulticompraNx1(compra=compra, lleva=lleva)

    @pytest.mark.parametrize("cantidad,precio", [(0, 10), (2, 0)])
    def test_nxprecio_requires_positive_values(self, cantidad, precio):
        with pytest.raises(ValueError):
            MulticompraNxPrecio(cantidad=cantidad, precio=precio)

    @pytest.mark.parametrize("compra,lleva", [(2.5, 1), (3, 2.0), (True, 1)])
    def test_nx1_requires_integers(self, compra, lleva):
        with pytest.raises(ValueError, match="integers"):
            MulticompraNx1(compra=compra, lleva=lleva)

    @pytest.mark.parametrize("cantidad", [2.5, 2.0])
    def test_nxprecio_requires_integer_quantity(self, cantidad):
        with pytest.raises(ValueError, match="integer"):
            MulticompraNxPrecio(cantidad=cantidad, precio=29)

    def test_bundle_requires_positive_price(self):
        with pytest.raises(ValueError):
            Bundle(precio_bundle=0)

    def test_tag_is_class_level(self):
        assert MulticompraNx1(compra=3, lleva=2).tipo is TipoPromocion.MULTICOMPRA_NX1
        assert Bundle(precio_bundle=10).tipo is TipoPromocion.BUNDLE


class TestPromocionConfig:
    """Config invariants."""

    def test_valid_config(self):
        cfg = _config()
        assert cfg.producto_ids == (101, 102)  # Coerced to tuple
        assert cfg.dias_post_promo == 14

    def test_is_hashable(self):
        """Configs can be used as memoization keys."""
        assert hash(_config()) == hash(_config())

    def test_parameter_tag_mismatch(self):
        """Parameters tagged for another mechanism fail fast."""
        with pytest.raises(ValueError, match="do not match"):
            _config(tipo=TipoPromocion.PRECIO_ESPECIAL)

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            _config(tipo="descuento_porcentaje")

    def test_promo_dates_inverted(self):
        with pytest.raises(ValueError, match="fecha_inicio_promo"):
            _config(fecha_inicio_promo=date(2025, 3, 20))

    def test_baseline_dates_inverted(self):
        with pytest.raises(ValueError, match="fecha_inicio_baseline"):
            _config(fecha_inicio_baseline=date(2025, 3, 1), fecha_fin_baseline=date(2025, 2, 1))

    def test_baseline_overlapping_promo(self):
        with pytest.raises(ValueError, match="Baseline window must end before"):
            _config(fecha_fin_baseline=date(2025, 3, 10))

    def test_single_day_promo(self):
        cfg = _config(fecha_inicio_promo=date(2025, 3, 10), fecha_fin_promo=date(2025, 3, 10))
        assert cfg.fecha_inicio_promo == cfg.fecha_fin_promo

    @pytest.mark.parametrize("dias", [0, -7])
    def test_retention_days_must_be_positive(self, dias):
        with pytest.raises(ValueError, match="dias_post_promo"):
            _config(dias_post_promo=dias)

    def test_optional_scopes_coerced(self):
        cfg = _config(tienda_ids=[1, 2], ciudades=["Monterrey"], categoria="Bebidas")
        assert cfg.tienda_ids == (1, 2)
        assert cfg.ciudades == ("Monterrey",)


def test_ventas_periodo_defaults():
    """Breakdown and series default to empty tuples."""
    ventas = VentasPeriodo(totales=VentasTotales(venta_total=0, unidades_total=0))
    assert ventas.por_producto == ()
    assert ventas.serie_diaria == ()
    assert ventas.totales.precio_promedio is None
