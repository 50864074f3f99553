"""
Error UX & messaging.

Transforms technical exceptions raised while loading or analyzing a
promotion into user-friendly messages with recovery guidance.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from enum import Enum
import json


# ============================================================
# Error Severity Levels
# ============================================================

class ErrorSeverity(Enum):
    """Error severity classification for presentation."""

    INFO = "info"           # Informational (no action needed)
    WARNING = "warning"     # Caution (optional action)
    ERROR = "error"         # Error (action required)
    CRITICAL = "critical"   # Critical (system-level issue)


# ============================================================
# Error Context
# ============================================================

@dataclass
class ErrorContext:
    """
    Structured error context for user-friendly messaging.

    Attributes:
        message: User-friendly error description
        severity: Error severity level
        technical_details: Technical error info (for logs/debugging)
        context: Additional context (file, operation, data)
        recovery_steps: List of recovery actions user can take
        error_code: Optional error code for support/documentation
    """
    message: str
    severity: ErrorSeverity
    technical_details: str
    context: Dict[str, Any] = field(default_factory=dict)
    recovery_steps: List[str] = field(default_factory=list)
    error_code: Optional[str] = None

    def format_for_display(self, include_technical: bool = False) -> str:
        """
        Format error for console display.

        Args:
            include_technical: Include technical details in message

        Returns:
            Multi-line message
        """
        lines = [self.message]

        if self.context:
            lines.append("")
            lines.append("Detalles:")
            for key, value in self.context.items():
                if value is not None:
                    lines.append(f"  • {key}: {value}")

        if self.recovery_steps:
            lines.append("")
            lines.append("Acciones sugeridas:")
            for i, step in enumerate(self.recovery_steps, 1):
                lines.append(f"  {i}. {step}")

        if include_technical and self.technical_details:
            lines.append("")
            lines.append("Detalles técnicos:")
            lines.append(f"  {self.technical_details}")

        if self.error_code:
            lines.append("")
            lines.append(f"Código de error: {self.error_code}")

        return "\n".join(lines)

    def format_for_log(self) -> str:
        """Format error for structured logging."""
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items() if v is not None)
        return f"[{self.severity.value.upper()}] {self.message} | Context: {context_str} | Technical: {self.technical_details}"


# ============================================================
# Error Formatter
# ============================================================

def format_validation_errors(errores: List[str], operation: str) -> ErrorContext:
    """
    Wrap wizard-level validation messages (see domain.validation).

    Args:
        errores: Messages returned by validate_promotion_config
        operation: Operation that was attempted
    """
    return ErrorContext(
        message="La configuración de la promoción no es válida",
        severity=ErrorSeverity.WARNING,
        technical_details="; ".join(errores),
        context={"Operación": operation},
        recovery_steps=list(errores),
        error_code="VAL_001",
    )


def format_error(
    exc: Exception,
    operation: str,
    context: Optional[Dict[str, Any]] = None,
) -> ErrorContext:
    """
    Transform an exception into an ErrorContext.

    Args:
        exc: The exception raised
        operation: Operation that failed (e.g. "cargar datos", "analizar promoción")
        context: Additional context (file, bundle directory, ...)

    Returns:
        ErrorContext with user-friendly message and recovery steps
    """
    ctx = {"Operación": operation}
    if context:
        ctx.update(context)
    technical = f"{type(exc).__name__}: {exc}"

    # JSONDecodeError subclasses ValueError: check it first
    if isinstance(exc, json.JSONDecodeError):
        return ErrorContext(
            message="El archivo de datos no contiene JSON válido",
            severity=ErrorSeverity.ERROR,
            technical_details=technical,
            context={**ctx, "Línea": exc.lineno, "Columna": exc.colno},
            recovery_steps=[
                "Verifica que el archivo fue exportado completo",
                "Valida el archivo con un editor o validador JSON",
            ],
            error_code="DATA_001",
        )

    if isinstance(exc, FileNotFoundError):
        return ErrorContext(
            message=f"Archivo no encontrado: {exc.filename}",
            severity=ErrorSeverity.ERROR,
            technical_details=technical,
            context=ctx,
            recovery_steps=[
                "Verifica que la carpeta contenga config.json, ventas_promo.json y ventas_baseline.json",
                "Revisa la ruta indicada",
            ],
            error_code="IO_001",
        )

    if isinstance(exc, PermissionError):
        return ErrorContext(
            message=f"Permisos insuficientes para leer: {exc.filename}",
            severity=ErrorSeverity.ERROR,
            technical_details=technical,
            context=ctx,
            recovery_steps=["Verifica los permisos de lectura del archivo"],
            error_code="IO_002",
        )

    if isinstance(exc, KeyError):
        return ErrorContext(
            message=f"Falta el campo obligatorio {exc}",
            severity=ErrorSeverity.ERROR,
            technical_details=technical,
            context=ctx,
            recovery_steps=[
                "Completa la configuración en el asistente de promociones",
                "Verifica que los datos provengan del servicio de agregación",
            ],
            error_code="DATA_002",
        )

    if isinstance(exc, (ValueError, TypeError)):
        return ErrorContext(
            message=f"Configuración o datos inválidos: {exc}",
            severity=ErrorSeverity.ERROR,
            technical_details=technical,
            context=ctx,
            recovery_steps=[
                "Revisa que el tipo de promoción coincida con sus parámetros",
                "Verifica que el baseline termine antes del inicio de la promoción",
                "Formato de fecha: YYYY-MM-DD (ej. 2025-03-10)",
            ],
            error_code="CFG_001",
        )

    if isinstance(exc, OSError):
        return ErrorContext(
            message=f"Error de E/S durante {operation}",
            severity=ErrorSeverity.ERROR,
            technical_details=technical,
            context=ctx,
            recovery_steps=["Reintenta la operación"],
            error_code="IO_003",
        )

    return ErrorContext(
        message=f"Error inesperado durante {operation}",
        severity=ErrorSeverity.CRITICAL,
        technical_details=technical,
        context=ctx,
        recovery_steps=[
            "Reintenta la operación",
            "Si el problema persiste, reporta el código de error",
        ],
        error_code="GENERIC_999",
    )
