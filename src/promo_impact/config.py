"""
Project configuration and constants.
"""
from pathlib import Path
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"

# Analysis periods (days)
DIAS_BASELINE_MINIMO = 7
DIAS_BASELINE_RECOMENDADO = 30
DIAS_RETENCION_DEFAULT = 14


# ============================================================
# Promotion type catalog
# ============================================================

TIPOS_PROMOCION: Dict[str, Dict[str, str]] = {
    "descuento_porcentaje": {
        "label": "Descuento %",
        "descripcion": "Porcentaje de descuento sobre precio regular",
        "ejemplo": "20% de descuento",
    },
    "precio_especial": {
        "label": "Precio Especial",
        "descripcion": "Precio fijo durante la promoción",
        "ejemplo": "$18.00 pesos",
    },
    "multicompra_nx1": {
        "label": "Multicompra NxM",
        "descripcion": "Compra N unidades, paga M (ej: 3x2)",
        "ejemplo": "3x2, 2x1",
    },
    "multicompra_nxprecio": {
        "label": "Multicompra Nx$X",
        "descripcion": "N unidades por precio fijo",
        "ejemplo": "2 x $29",
    },
    "bundle": {
        "label": "Bundle/Combo",
        "descripcion": "Varios productos juntos a precio especial",
        "ejemplo": "Combo familiar $99",
    },
}


def get_tipo_promocion_info(tipo: Any) -> Optional[Dict[str, str]]:
    """
    Get catalog entry for a promotion type.

    Args:
        tipo: TipoPromocion member or its string value

    Returns:
        Dict with label/descripcion/ejemplo, or None if unknown
    """
    key = getattr(tipo, "value", tipo)
    return TIPOS_PROMOCION.get(key)


# ============================================================
# Settings Management
# ============================================================

def get_settings_path() -> Path:
    """Default settings.json location (inside the data directory)."""
    from .utils.paths import get_data_dir  # noqa: PLC0415
    return get_data_dir() / SETTINGS_FILENAME


def load_settings(path: "str | Path | None" = None) -> Dict[str, Any]:
    """
    Load settings.json.

    Args:
        path: Settings file (default: data_dir/settings.json)

    Returns:
        Settings dict, empty if the file is missing or unreadable
    """
    settings_file = Path(path) if path is not None else get_settings_path()
    if not settings_file.exists():
        return {}

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Could not read settings from {settings_file}: {e}")
        return {}

    if not isinstance(settings, dict):
        logger.warning(f"Ignoring settings file {settings_file}: top-level value is not an object")
        return {}
    return settings


def save_settings(settings: Dict[str, Any], path: "str | Path | None" = None) -> bool:
    """
    Write settings.json.

    Args:
        settings: Settings dict
        path: Settings file (default: data_dir/settings.json)

    Returns:
        True if successful, False otherwise
    """
    settings_file = Path(path) if path is not None else get_settings_path()
    try:
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        return True
    except IOError as e:
        logger.error(f"Could not write settings to {settings_file}: {e}")
        return False
