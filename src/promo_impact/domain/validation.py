"""
Centralized validation rules for promotion configuration.

Validators return (is_valid, message) tuples and never raise: they back the
wizard / CLI layer, which reports every problem at once.  The domain models
themselves fail fast with ValueError once a config is actually built.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from .models import TipoPromocion


def validate_date_range(start_date: date, end_date: date, allow_future: bool = True) -> Tuple[bool, str]:
    """
    Validate date range.

    Args:
        start_date: Start date
        end_date: End date
        allow_future: Whether future dates are allowed

    Returns:
        (is_valid, error_message)
    """
    if start_date > end_date:
        return False, "La fecha de inicio debe ser anterior a la fecha de fin"

    if not allow_future:
        today = date.today()
        if end_date > today:
            return False, "Las fechas no pueden estar en el futuro"

    return True, ""


def _parse_fecha(value: Any) -> Optional[date]:
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _positive(params: Dict[str, Any], key: str) -> bool:
    value = params.get(key)
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _entero(params: Dict[str, Any], key: str) -> bool:
    value = params.get(key)
    return isinstance(value, int) or (isinstance(value, float) and value.is_integer())


def validate_parametros(parametros: Dict[str, Any]) -> Tuple[bool, str]:
    """
    Validate promotion parameters payload ({"tipo": ..., <fields>}).

    Returns:
        (is_valid, error_message)
    """
    if not isinstance(parametros, dict):
        return False, "Los parámetros de la promoción no tienen un formato válido"

    tipo = parametros.get("tipo")

    if tipo == TipoPromocion.DESCUENTO_PORCENTAJE.value:
        porcentaje = parametros.get("porcentaje")
        if not _positive(parametros, "porcentaje") or porcentaje > 100:
            return False, "El porcentaje de descuento debe ser mayor a 0 y hasta 100"

    elif tipo == TipoPromocion.PRECIO_ESPECIAL.value:
        if not _positive(parametros, "precio"):
            return False, "El precio especial debe ser mayor a 0"

    elif tipo == TipoPromocion.MULTICOMPRA_NX1.value:
        compra = parametros.get("compra")
        lleva = parametros.get("lleva")
        if not _positive(parametros, "compra") or not _positive(parametros, "lleva"):
            return False, "Las cantidades de compra y lleva deben ser mayores a 0"
        if not _entero(parametros, "compra") or not _entero(parametros, "lleva"):
            return False, "Las cantidades de compra y lleva deben ser números enteros"
        if compra <= lleva:
            return False, "La cantidad a comprar debe ser mayor que la que lleva"

    elif tipo == TipoPromocion.MULTICOMPRA_NXPRECIO.value:
        if not _positive(parametros, "cantidad") or not _positive(parametros, "precio"):
            return False, "La cantidad y precio deben ser mayores a 0"
        if not _entero(parametros, "cantidad"):
            return False, "La cantidad debe ser un número entero"

    elif tipo == TipoPromocion.BUNDLE.value:
        if not _positive(parametros, "precioBundle"):
            return False, "El precio del bundle debe ser mayor a 0"

    else:
        return False, f"Tipo de promoción desconocido: {tipo}"

    return True, ""


def validate_promotion_config(config: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """
    Validate a (possibly partial) promotion config as emitted by the wizard.

    Keys follow the wizard payload (productoIds, tipo, parametros,
    fechaInicioPromo, ...).

    Args:
        config: Raw config payload

    Returns:
        (is_valid, error_messages)
    """
    if not isinstance(config, dict):
        return False, ["La configuración de la promoción no tiene un formato válido"]

    errores: List[str] = []

    if not config.get("productoIds"):
        errores.append("Debe seleccionar al menos un producto")

    tipo = config.get("tipo")
    if not tipo:
        errores.append("Debe seleccionar un tipo de promoción")

    parametros = config.get("parametros")
    if not parametros:
        errores.append("Debe configurar los parámetros de la promoción")
    else:
        ok, msg = validate_parametros(parametros)
        if not ok:
            errores.append(msg)
        elif tipo and parametros.get("tipo") != tipo:
            errores.append("Los parámetros no corresponden al tipo de promoción seleccionado")

    inicio_promo = _parse_fecha(config.get("fechaInicioPromo"))
    fin_promo = _parse_fecha(config.get("fechaFinPromo"))
    if inicio_promo is None or fin_promo is None:
        errores.append("Debe definir el período de la promoción")
    else:
        ok, msg = validate_date_range(inicio_promo, fin_promo)
        if not ok:
            errores.append(msg)

    inicio_baseline = _parse_fecha(config.get("fechaInicioBaseline"))
    fin_baseline = _parse_fecha(config.get("fechaFinBaseline"))
    if inicio_baseline is None or fin_baseline is None:
        errores.append("Debe definir el período de baseline")
    else:
        ok, msg = validate_date_range(inicio_baseline, fin_baseline)
        if not ok:
            errores.append(msg)
        elif inicio_promo is not None and fin_baseline >= inicio_promo:
            errores.append("El baseline debe terminar antes del inicio de la promoción")

    dias_post = config.get("diasPostPromo")
    if dias_post is not None and (not isinstance(dias_post, int) or dias_post <= 0):
        errores.append("Los días post-promoción deben ser mayores a 0")

    return len(errores) == 0, errores
