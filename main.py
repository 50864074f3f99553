#!/usr/bin/env python3
"""
Promo Impact - command line entry point.

Runs the promotion impact analysis over an input bundle directory and prints
the result as JSON.

Usage:
    python main.py data/promo_2025_03/
    python main.py data/promo_2025_03/ --settings data/settings.json --indent 2

Bundle directory:
    config.json              wizard config            (required)
    ventas_promo.json        promo window             (required)
    ventas_baseline.json     baseline window          (required)
    ventas_post_promo.json   retention window         (optional)
    canibalizacion.json      category siblings        (optional)
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from promo_impact.analytics.engine import analyze_promotion, resultado_to_dict
from promo_impact.analytics.thresholds import load_umbrales
from promo_impact.config import load_settings
from promo_impact.domain.validation import validate_promotion_config
from promo_impact.persistence.json_layer import JSONLayer
from promo_impact.utils.error_formatting import format_error, format_validation_errors
from promo_impact.utils.logging_config import get_logger, setup_logging

logger = get_logger("promo_impact.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analiza el impacto de una promoción (uplift, ROI, elasticidad, canibalización, retención)",
    )
    parser.add_argument("data_dir", type=Path, help="Carpeta con los archivos JSON de entrada")
    parser.add_argument("--settings", type=Path, default=None,
                        help="settings.json con umbrales personalizados (default: data/settings.json)")
    parser.add_argument("--log-dir", type=Path, default=None, help="Carpeta de logs")
    parser.add_argument("--indent", type=int, default=2, help="Indentación del JSON de salida")
    parser.add_argument("--verbose", action="store_true", help="Muestra mensajes informativos en consola")
    return parser


def run(args: argparse.Namespace) -> int:
    """Run one analysis; returns the process exit code."""
    layer = JSONLayer(args.data_dir)
    operation = "cargar datos"
    try:
        raw_config = layer.read_raw_config()
        valido, errores = validate_promotion_config(raw_config)
        if not valido:
            error_ctx = format_validation_errors(errores, "validar configuración")
            logger.warning(error_ctx.format_for_log())
            print(error_ctx.format_for_display(), file=sys.stderr)
            return 1

        config = layer.read_config()
        promo = layer.read_ventas_promo()
        baseline = layer.read_ventas_baseline()
        post_promo = layer.read_ventas_post_promo()
        canibalizacion = layer.read_canibalizacion()

        umbrales = load_umbrales(load_settings(args.settings))

        operation = "analizar promoción"
        resultado = analyze_promotion(config, promo, baseline, post_promo, canibalizacion, umbrales)
    except (OSError, ValueError, TypeError, KeyError) as e:
        error_ctx = format_error(e, operation, {"Carpeta": str(args.data_dir)})
        logger.error(error_ctx.format_for_log())
        print(error_ctx.format_for_display(), file=sys.stderr)
        return 1

    print(json.dumps(resultado_to_dict(resultado), indent=args.indent, ensure_ascii=False))
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, console_level=logging.INFO if args.verbose else logging.CRITICAL)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
