"""
Modelo de dominio: Límites de escaneo.

Los reportes pueden ser enormes o estar corruptos. Estas cotas solo
limitan el costo del peor caso; no afectan la corrección en reportes
normales, donde encabezados y metadatos están en las primeras líneas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanLimits:
    """Cotas configurables de los escaneos sobre la lista de líneas."""

    format_scan_lines: int = 5000
    """Líneas revisadas al buscar la firma del layout y el periodo."""

    operator_scan_lines: int = 50
    """Líneas revisadas al buscar 'Operador:' (nombre de la unidad)."""

    def __post_init__(self) -> None:
        if self.format_scan_lines < 1:
            raise ValueError(
                f"format_scan_lines debe ser positivo: {self.format_scan_lines}"
            )
        if self.operator_scan_lines < 1:
            raise ValueError(
                f"operator_scan_lines debe ser positivo: {self.operator_scan_lines}"
            )
