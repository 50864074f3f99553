"""
JSON input layer: wizard config and aggregation-service payloads → domain models.

Payload shapes follow the collaborators:
- Config (wizard, camelCase): productoIds, tipo, parametros{tipo, ...},
  fechaInicioPromo, fechaFinPromo, fechaInicioBaseline, fechaFinBaseline,
  diasPostPromo, analizarComoGrupo, productoGrupo, tiendaIds, ciudades, categoria
- VentasPeriodo (aggregation RPC, snake_case): totales{...}, por_producto[...],
  serie_diaria[...]
- Cannibalization rows (aggregation RPC): list of sibling products

Read-only: analysis results are never written back.
"""

from datetime import date
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..domain.models import (
    Bundle,
    CanibalizacionItem,
    DescuentoPorcentaje,
    MulticompraNx1,
    MulticompraNxPrecio,
    PrecioEspecial,
    ProductoVentas,
    PromocionConfig,
    PromocionParametros,
    TipoPromocion,
    VentaDiaria,
    VentasPeriodo,
    VentasTotales,
)
from ..config import DIAS_RETENCION_DEFAULT

logger = logging.getLogger(__name__)


def _fecha(value: Any) -> date:
    if isinstance(value, date):
        return value
    # Accept both "YYYY-MM-DD" and full ISO timestamps
    return date.fromisoformat(str(value)[:10])


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def _cantidad(value: Any, key: str) -> int:
    # Multi-buy counts are whole units; 3.0 is fine, 2.5 is not
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{key} must be a whole number, got {value!r}")
    return int(number)


def _tipo(value: Any) -> TipoPromocion:
    try:
        return TipoPromocion(value)
    except ValueError:
        raise ValueError(f"Unknown promotion type: {value!r}") from None


def parse_parametros(data: Dict[str, Any]) -> PromocionParametros:
    """Build the parameter variant selected by data["tipo"]."""
    if not isinstance(data, dict):
        raise ValueError(f"Promotion parameters must be an object, got {type(data).__name__}")
    tipo = _tipo(data.get("tipo"))

    if tipo is TipoPromocion.DESCUENTO_PORCENTAJE:
        return DescuentoPorcentaje(porcentaje=float(data["porcentaje"]))
    if tipo is TipoPromocion.PRECIO_ESPECIAL:
        return PrecioEspecial(precio=float(data["precio"]))
    if tipo is TipoPromocion.MULTICOMPRA_NX1:
        return MulticompraNx1(compra=_cantidad(data["compra"], "compra"),
                              lleva=_cantidad(data["lleva"], "lleva"))
    if tipo is TipoPromocion.MULTICOMPRA_NXPRECIO:
        return MulticompraNxPrecio(cantidad=_cantidad(data["cantidad"], "cantidad"),
                                   precio=float(data["precio"]))
    if tipo is TipoPromocion.BUNDLE:
        return Bundle(precio_bundle=float(data["precioBundle"]))

    raise ValueError(f"Unhandled promotion type: {tipo}")


def parse_config(data: Dict[str, Any]) -> PromocionConfig:
    """
    Build a PromocionConfig from the wizard payload.

    Raises:
        KeyError: If a required key is missing
        ValueError: If values are malformed or violate config invariants
    """
    tienda_ids = data.get("tiendaIds")
    ciudades = data.get("ciudades")

    return PromocionConfig(
        producto_ids=tuple(int(p) for p in data["productoIds"]),
        tipo=_tipo(data["tipo"]),
        parametros=parse_parametros(data["parametros"]),
        fecha_inicio_promo=_fecha(data["fechaInicioPromo"]),
        fecha_fin_promo=_fecha(data["fechaFinPromo"]),
        fecha_inicio_baseline=_fecha(data["fechaInicioBaseline"]),
        fecha_fin_baseline=_fecha(data["fechaFinBaseline"]),
        dias_post_promo=int(data.get("diasPostPromo") or DIAS_RETENCION_DEFAULT),
        analizar_como_grupo=bool(data.get("analizarComoGrupo", False)),
        producto_grupo=data.get("productoGrupo"),
        # Empty filters mean "no filter", as in the aggregation RPC
        tienda_ids=tuple(int(t) for t in tienda_ids) if tienda_ids else None,
        ciudades=tuple(ciudades) if ciudades else None,
        categoria=data.get("categoria") or None,
    )


def parse_ventas_periodo(data: Dict[str, Any]) -> VentasPeriodo:
    """Build a VentasPeriodo from the aggregation payload."""
    if not isinstance(data, dict):
        raise ValueError(f"Sales payload must be an object, got {type(data).__name__}")
    t = data.get("totales") or {}
    if not isinstance(t, dict):
        raise ValueError(f"Sales totals must be an object, got {type(t).__name__}")
    totales = VentasTotales(
        venta_total=float(t.get("venta_total") or 0),
        unidades_total=float(t.get("unidades_total") or 0),
        transacciones=int(t.get("transacciones") or 0),
        precio_promedio=_optional_float(t.get("precio_promedio")),
        tiendas_con_venta=int(t.get("tiendas_con_venta") or 0),
        dias_con_venta=int(t.get("dias_con_venta") or 0),
    )

    por_producto = [
        ProductoVentas(
            producto_id=int(p["producto_id"]),
            producto_nombre=p.get("producto_nombre") or "",
            venta=float(p.get("venta") or 0),
            unidades=float(p.get("unidades") or 0),
            upc=p.get("upc") or "",
            categoria=p.get("categoria") or "",
            precio_promedio=_optional_float(p.get("precio_promedio")),
            tiendas=int(p.get("tiendas") or 0),
            dias_venta=int(p.get("dias_venta") or 0),
        )
        for p in data.get("por_producto") or []
    ]

    serie_diaria = [
        VentaDiaria(
            fecha=_fecha(d["fecha"]),
            venta=float(d.get("venta") or 0),
            unidades=float(d.get("unidades") or 0),
            precio_promedio=_optional_float(d.get("precio_promedio")),
        )
        for d in data.get("serie_diaria") or []
    ]

    return VentasPeriodo(totales=totales, por_producto=por_producto, serie_diaria=serie_diaria)


def parse_canibalizacion(rows: List[Dict[str, Any]]) -> List[CanibalizacionItem]:
    """Build sibling rows from the cannibalization payload."""
    return [
        CanibalizacionItem(
            producto_id=int(r["producto_id"]),
            producto_nombre=r.get("producto_nombre") or "",
            venta_periodo_promo=float(r.get("venta_periodo_promo") or 0),
            venta_baseline=float(r.get("venta_baseline") or 0),
            variacion_pct=float(r.get("variacion_pct") or 0),
            upc=r.get("upc") or "",
            categoria=r.get("categoria") or "",
        )
        for r in rows or []
    ]


class JSONLayer:
    """
    Reads an analysis input bundle from a directory:

        config.json              wizard config            (required)
        ventas_promo.json        promo window             (required)
        ventas_baseline.json     baseline window          (required)
        ventas_post_promo.json   retention window         (optional)
        canibalizacion.json      category siblings        (optional)
    """

    CONFIG_FILE = "config.json"
    PROMO_FILE = "ventas_promo.json"
    BASELINE_FILE = "ventas_baseline.json"
    POST_PROMO_FILE = "ventas_post_promo.json"
    CANIBALIZACION_FILE = "canibalizacion.json"

    def __init__(self, data_dir: Path):
        """
        Args:
            data_dir: Directory containing the bundle files
        """
        self.data_dir = Path(data_dir)

    def _read_json(self, filename: str) -> Any:
        path = self.data_dir / filename
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _exists(self, filename: str) -> bool:
        return (self.data_dir / filename).exists()

    def read_raw_config(self) -> Dict[str, Any]:
        """Config payload as-is (for wizard-level validation)."""
        return self._read_json(self.CONFIG_FILE)

    def read_config(self) -> PromocionConfig:
        return parse_config(self.read_raw_config())

    def read_ventas_promo(self) -> VentasPeriodo:
        return parse_ventas_periodo(self._read_json(self.PROMO_FILE))

    def read_ventas_baseline(self) -> VentasPeriodo:
        return parse_ventas_periodo(self._read_json(self.BASELINE_FILE))

    def read_ventas_post_promo(self) -> Optional[VentasPeriodo]:
        """Retention window, or None if the file is absent."""
        if not self._exists(self.POST_PROMO_FILE):
            logger.debug(f"No {self.POST_PROMO_FILE} in {self.data_dir}, retention skipped")
            return None
        return parse_ventas_periodo(self._read_json(self.POST_PROMO_FILE))

    def read_canibalizacion(self) -> Optional[List[CanibalizacionItem]]:
        """Sibling rows, or None if the file is absent."""
        if not self._exists(self.CANIBALIZACION_FILE):
            logger.debug(f"No {self.CANIBALIZACION_FILE} in {self.data_dir}, cannibalization skipped")
            return None
        return parse_canibalizacion(self._read_json(self.CANIBALIZACION_FILE))
