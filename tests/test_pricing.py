"""
Tests for the discount cost / effective price model (src/promo_impact/domain/pricing.py).

Covers:
- Cost per promotion mechanism
- Floor policy for multi-buy sets (partial sets cost nothing)
- Unknown baseline price → zero cost / None price
- Effective price bounds for percentage and special-price promotions
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
)
from promo_impact.domain.pricing import compute_discount_cost, compute_effective_price


def _config(parametros) -> PromocionConfig:
    return PromocionConfig(
        producto_ids=(1,),
        tipo=parametros.tipo,
        parametros=parametros,
        fecha_inicio_promo=date(2025, 3, 10),
        fecha_fin_promo=date(2025, 3, 16),
        fecha_inicio_baseline=date(2025, 3, 3),
        fecha_fin_baseline=date(2025, 3, 9),
    )


class TestComputeDiscountCost:
    """Discount cost per mechanism."""

    def test_percentage(self):
        """20% off, 1875 units at baseline price 100 → 37500."""
        cfg = _config(DescuentoPorcentaje(porcentaje=20))
        assert compute_discount_cost(cfg, 1875, 100.0) == pytest.approx(37500.0)

    def test_special_price(self):
        """Special price 18 vs baseline 20 → 2 per unit."""
        cfg = _config(PrecioEspecial(precio=18))
        assert compute_discount_cost(cfg, 50, 20.0) == pytest.approx(100.0)

    def test_special_price_above_baseline_costs_nothing(self):
        """A 'special' price above the regular price is not a cost."""
        cfg = _config(PrecioEspecial(precio=25))
        assert compute_discount_cost(cfg, 50, 20.0) == 0.0

    def test_nx1_complete_sets(self):
        """3x2, 10 units at 30 → floor(10/3)=3 sets × 1 free × 30 = 90."""
        cfg = _config(MulticompraNx1(compra=3, lleva=2))
        assert compute_discount_cost(cfg, 10, 30.0) == pytest.approx(90.0)

    def test_nx1_partial_set_costs_nothing(self):
        """2 units of a 3x2 never complete a set."""
        cfg = _config(MulticompraNx1(compra=3, lleva=2))
        assert compute_discount_cost(cfg, 2, 30.0) == 0.0

    def test_nx1_two_for_one(self):
        """2x1, 7 units at 10 → 3 sets × 1 free × 10 = 30."""
        cfg = _config(MulticompraNx1(compra=2, lleva=1))
        assert compute_discount_cost(cfg, 7, 10.0) == pytest.approx(30.0)

    def test_nxprecio(self):
        """2 x $29 with regular price 20 → 11 per set; 5 units → 2 sets → 22."""
        cfg = _config(MulticompraNxPrecio(cantidad=2, precio=29))
        assert compute_discount_cost(cfg, 5, 20.0) == pytest.approx(22.0)

    def test_nxprecio_not_cheaper_costs_nothing(self):
        """Set price above N × regular price → no discount."""
        cfg = _config(MulticompraNxPrecio(cantidad=2, precio=45))
        assert compute_discount_cost(cfg, 10, 20.0) == 0.0

    def test_bundle_costs_nothing(self):
        """Bundle economics are already in the observed price."""
        cfg = _config(Bundle(precio_bundle=99))
        assert compute_discount_cost(cfg, 100, 50.0) == 0.0

    @pytest.mark.parametrize("precio_baseline", [None, 0, -5.0])
    def test_unknown_baseline_price(self, precio_baseline):
        """No usable baseline price → no attributable cost."""
        cfg = _config(DescuentoPorcentaje(porcentaje=20))
        assert compute_discount_cost(cfg, 1000, precio_baseline) == 0.0

    def test_zero_units(self):
        cfg = _config(DescuentoPorcentaje(porcentaje=20))
        assert compute_discount_cost(cfg, 0, 100.0) == 0.0


class TestComputeEffectivePrice:
    """Effective unit price under the promotion."""

    def test_percentage(self):
        cfg = _config(DescuentoPorcentaje(porcentaje=20))
        assert compute_effective_price(cfg, 100.0) == pytest.approx(80.0)

    def test_percentage_zero_is_identity(self):
        """0% off leaves the baseline price untouched."""
        cfg = _config(DescuentoPorcentaje(porcentaje=0))
        assert compute_effective_price(cfg, 37.5) == 37.5

    def test_percentage_full(self):
        cfg = _config(DescuentoPorcentaje(porcentaje=100))
        assert compute_effective_price(cfg, 37.5) == 0.0

    @pytest.mark.parametrize("porcentaje", [0, 1, 12.5, 33, 50, 99.9, 100])
    @pytest.mark.parametrize("precio", [0.5, 10.0, 123.45])
    def test_percentage_never_exceeds_baseline(self, porcentaje, precio):
        cfg = _config(DescuentoPorcentaje(porcentaje=porcentaje))
        assert compute_effective_price(cfg, precio) <= precio

    def test_special_price(self):
        cfg = _config(PrecioEspecial(precio=18))
        assert compute_effective_price(cfg, 20.0) == 18

    def test_special_price_above_baseline_is_capped(self):
        """A special price above the regular one is not a discount."""
        cfg = _config(PrecioEspecial(precio=25))
        assert compute_effective_price(cfg, 20.0) == 20.0

    @pytest.mark.parametrize("especial", [0.5, 18, 20, 25, 1000])
    @pytest.mark.parametrize("precio", [0.5, 20.0, 123.45])
    def test_special_price_never_exceeds_baseline(self, especial, precio):
        cfg = _config(PrecioEspecial(precio=especial))
        assert compute_effective_price(cfg, precio) <= precio

    def test_special_price_without_baseline(self):
        """Fixed-price mechanisms do not need a baseline price."""
        cfg = _config(PrecioEspecial(precio=18))
        assert compute_effective_price(cfg, None) == 18

    def test_nx1(self):
        """3x2 at 30 → pay 60 for 3 units → 20."""
        cfg = _config(MulticompraNx1(compra=3, lleva=2))
        assert compute_effective_price(cfg, 30.0) == pytest.approx(20.0)

    def test_nx1_without_baseline(self):
        cfg = _config(MulticompraNx1(compra=3, lleva=2))
        assert compute_effective_price(cfg, None) is None

    def test_nxprecio(self):
        cfg = _config(MulticompraNxPrecio(cantidad=2, precio=29))
        assert compute_effective_price(cfg, 20.0) == pytest.approx(14.5)
        assert compute_effective_price(cfg, None) == pytest.approx(14.5)

    def test_bundle(self):
        cfg = _config(Bundle(precio_bundle=99))
        assert compute_effective_price(cfg, 120.0) == 99

    def test_percentage_without_baseline(self):
        cfg = _config(DescuentoPorcentaje(porcentaje=20))
        assert compute_effective_price(cfg, None) is None


def test_every_promotion_type_is_priced():
    """Each TipoPromocion has a parameter variant handled by both functions."""
    variantes = {
        TipoPromocion.DESCUENTO_PORCENTAJE: DescuentoPorcentaje(porcentaje=10),
        TipoPromocion.PRECIO_ESPECIAL: PrecioEspecial(precio=5),
        TipoPromocion.MULTICOMPRA_NX1: MulticompraNx1(compra=2, lleva=1),
        TipoPromocion.MULTICOMPRA_NXPRECIO: MulticompraNxPrecio(cantidad=2, precio=9),
        TipoPromocion.BUNDLE: Bundle(precio_bundle=15),
    }
    assert set(variantes) == set(TipoPromocion)
    for parametros in variantes.values():
        cfg = _config(parametros)
        assert compute_discount_cost(cfg, 10, 10.0) >= 0
        assert compute_effective_price(cfg, 10.0) is not None
