"""
Domain models for promo-impact.

Pure data classes + value objects. No I/O, no side effects.
Deterministic and fully testable.

Input snapshots (VentasPeriodo, CanibalizacionItem) mirror the payloads of the
aggregation service; PromocionConfig mirrors what the promotion wizard emits.
"""
from dataclasses import dataclass, field
from enum import Enum
from datetime import date as Date
from typing import ClassVar, Optional, Tuple, Union

from ..config import DIAS_RETENCION_DEFAULT


class TipoPromocion(Enum):
    """Promotion mechanisms supported by the analysis engine."""
    DESCUENTO_PORCENTAJE = "descuento_porcentaje"  # 20% off
    PRECIO_ESPECIAL = "precio_especial"            # fixed price during promo
    MULTICOMPRA_NX1 = "multicompra_nx1"            # 3x2, 2x1
    MULTICOMPRA_NXPRECIO = "multicompra_nxprecio"  # 2 x $29
    BUNDLE = "bundle"                              # combo at special price


# ============================================================
# Promotion parameters (tagged union keyed by TipoPromocion)
# ============================================================

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class DescuentoPorcentaje:
    """Percentage off the regular price."""
    tipo: ClassVar[TipoPromocion] = TipoPromocion.DESCUENTO_PORCENTAJE
    porcentaje: float

    def __post_init__(self):
        # 0 is accepted as "no discount"; the wizard rejects it upstream
        if not 0 <= self.porcentaje <= 100:
            raise ValueError(f"porcentaje must be in [0, 100], got {self.porcentaje}")


@dataclass(frozen=True)
class PrecioEspecial:
    """Fixed unit price during the promotion."""
    tipo: ClassVar[TipoPromocion] = TipoPromocion.PRECIO_ESPECIAL
    precio: float

    def __post_init__(self):
        if self.precio <= 0:
            raise ValueError(f"precio must be > 0, got {self.precio}")


@dataclass(frozen=True)
class MulticompraNx1:
    """Buy `compra` units, pay `lleva` (3x2: compra=3, lleva=2)."""
    tipo: ClassVar[TipoPromocion] = TipoPromocion.MULTICOMPRA_NX1
    compra: int
    lleva: int

    def __post_init__(self):
        if not _is_int(self.compra) or not _is_int(self.lleva):
            raise ValueError(
                f"compra and lleva must be integers, got compra={self.compra!r}, lleva={self.lleva!r}"
            )
        if self.lleva < 1:
            raise ValueError(f"lleva must be >= 1, got {self.lleva}")
        if self.compra <= self.lleva:
            raise ValueError(
                f"compra must be greater than lleva, got compra={self.compra}, lleva={self.lleva}"
            )


@dataclass(frozen=True)
class MulticompraNxPrecio:
    """`cantidad` units for a fixed `precio` (2 x $29)."""
    tipo: ClassVar[TipoPromocion] = TipoPromocion.MULTICOMPRA_NXPRECIO
    cantidad: int
    precio: float

    def __post_init__(self):
        if not _is_int(self.cantidad):
            raise ValueError(f"cantidad must be an integer, got {self.cantidad!r}")
        if self.cantidad <= 0:
            raise ValueError(f"cantidad must be > 0, got {self.cantidad}")
        if self.precio <= 0:
            raise ValueError(f"precio must be > 0, got {self.precio}")


@dataclass(frozen=True)
class Bundle:
    """Several products sold together at a bundle price."""
    tipo: ClassVar[TipoPromocion] = TipoPromocion.BUNDLE
    precio_bundle: float

    def __post_init__(self):
        if self.precio_bundle <= 0:
            raise ValueError(f"precio_bundle must be > 0, got {self.precio_bundle}")


PromocionParametros = Union[
    DescuentoPorcentaje,
    PrecioEspecial,
    MulticompraNx1,
    MulticompraNxPrecio,
    Bundle,
]

PARAMETROS_POR_TIPO = {
    TipoPromocion.DESCUENTO_PORCENTAJE: DescuentoPorcentaje,
    TipoPromocion.PRECIO_ESPECIAL: PrecioEspecial,
    TipoPromocion.MULTICOMPRA_NX1: MulticompraNx1,
    TipoPromocion.MULTICOMPRA_NXPRECIO: MulticompraNxPrecio,
    TipoPromocion.BUNDLE: Bundle,
}


# ============================================================
# Promotion configuration
# ============================================================

@dataclass(frozen=True)
class PromocionConfig:
    """Promotion under analysis - immutable, validated on construction."""
    producto_ids: Tuple[int, ...]
    tipo: TipoPromocion
    parametros: PromocionParametros

    # Periods
    fecha_inicio_promo: Date
    fecha_fin_promo: Date
    fecha_inicio_baseline: Date
    fecha_fin_baseline: Date
    dias_post_promo: int = DIAS_RETENCION_DEFAULT  # Retention window (days after promo end)

    # Grouping
    analizar_como_grupo: bool = False
    producto_grupo: Optional[str] = None

    # Optional scoping (already applied by the aggregation service)
    tienda_ids: Optional[Tuple[int, ...]] = None
    ciudades: Optional[Tuple[str, ...]] = None
    categoria: Optional[str] = None  # Enables cannibalization analysis

    def __post_init__(self):
        object.__setattr__(self, "producto_ids", tuple(self.producto_ids))
        if self.tienda_ids is not None:
            object.__setattr__(self, "tienda_ids", tuple(self.tienda_ids))
        if self.ciudades is not None:
            object.__setattr__(self, "ciudades", tuple(self.ciudades))

        if not isinstance(self.tipo, TipoPromocion):
            raise ValueError(f"Unknown promotion type: {self.tipo!r}")
        expected_cls = PARAMETROS_POR_TIPO[self.tipo]
        if not isinstance(self.parametros, expected_cls):
            raise ValueError(
                f"Parameters {type(self.parametros).__name__} do not match promotion type "
                f"{self.tipo.value} (expected {expected_cls.__name__})"
            )
        if self.fecha_inicio_promo > self.fecha_fin_promo:
            raise ValueError(
                f"fecha_inicio_promo ({self.fecha_inicio_promo}) is after "
                f"fecha_fin_promo ({self.fecha_fin_promo})"
            )
        if self.fecha_inicio_baseline > self.fecha_fin_baseline:
            raise ValueError(
                f"fecha_inicio_baseline ({self.fecha_inicio_baseline}) is after "
                f"fecha_fin_baseline ({self.fecha_fin_baseline})"
            )
        if self.fecha_fin_baseline >= self.fecha_inicio_promo:
            raise ValueError(
                f"Baseline window must end before the promotion starts "
                f"(baseline ends {self.fecha_fin_baseline}, promo starts {self.fecha_inicio_promo})"
            )
        if self.dias_post_promo <= 0:
            raise ValueError(f"dias_post_promo must be > 0, got {self.dias_post_promo}")


# ============================================================
# Sales snapshots (aggregation service output)
# ============================================================

@dataclass(frozen=True)
class VentasTotales:
    """Window totals."""
    venta_total: float
    unidades_total: float
    transacciones: int = 0
    precio_promedio: Optional[float] = None
    tiendas_con_venta: int = 0  # Stores with any sale in the window
    dias_con_venta: int = 0     # Days with any sale in the window


@dataclass(frozen=True)
class ProductoVentas:
    """Per-product totals for one window."""
    producto_id: int
    producto_nombre: str
    venta: float
    unidades: float
    upc: str = ""
    categoria: str = ""
    precio_promedio: Optional[float] = None
    tiendas: int = 0
    dias_venta: int = 0


@dataclass(frozen=True)
class VentaDiaria:
    """One point of the daily time series."""
    fecha: Date
    venta: float
    unidades: float
    precio_promedio: Optional[float] = None


@dataclass(frozen=True)
class VentasPeriodo:
    """Pre-aggregated sales for one time window (promo, baseline or post-promo)."""
    totales: VentasTotales
    por_producto: Tuple[ProductoVentas, ...] = field(default_factory=tuple)
    serie_diaria: Tuple[VentaDiaria, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "por_producto", tuple(self.por_producto))
        object.__setattr__(self, "serie_diaria", tuple(self.serie_diaria))


@dataclass(frozen=True)
class CanibalizacionItem:
    """Category-sibling product: promo-period vs baseline revenue."""
    producto_id: int
    producto_nombre: str
    venta_periodo_promo: float
    venta_baseline: float
    variacion_pct: float
    upc: str = ""
    categoria: str = ""
