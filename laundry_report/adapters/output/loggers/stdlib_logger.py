"""
Adaptador de salida: Logger sobre el módulo `logging`.

Implementación de ProcessLogger para cuando el proyecto se usa como
librería: los eventos van al logger "laundry_report" y quien lo use
decide handlers, formato y nivel. Es el logger por defecto de
create_default_parser().
"""

import logging
from pathlib import Path

from laundry_report.domain.models.layout import Layout
from laundry_report.domain.ports.process_logger import ProcessLogger

LOGGER_NAME = "laundry_report"


class StdlibProcessLogger(ProcessLogger):
    """Envía los eventos de procesamiento a `logging`."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger(LOGGER_NAME)
        self._archivos_recibidos: int = 0
        self._archivos_descartados: int = 0
        self._reportes_procesados: int = 0
        self._total_transacciones: int = 0
        self._filas_descartadas: int = 0
        self._errores: list[dict] = []

    def log_file_received(self, file_path: Path) -> None:
        self._archivos_recibidos += 1
        self._log.info("Recibido: %s", file_path.name)

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        self._log.info("Descartado: %s — %s", file_path.name, reason)

    def log_layout_detected(self, layout: Layout) -> None:
        if layout is Layout.UNKNOWN:
            self._log.warning("Layout no identificado; no se extraerán transacciones")
        else:
            self._log.debug("Layout detectado: %s", layout.value)

    def log_header_not_found(self, layout: Layout) -> None:
        self._log.warning(
            "Layout %s detectado pero no se encontró la fila de encabezado. "
            "El parseo puede fallar.",
            layout.value,
        )

    def log_parse_complete(self, num_accepted: int, num_skipped: int) -> None:
        self._reportes_procesados += 1
        self._total_transacciones += num_accepted
        self._filas_descartadas += num_skipped
        self._log.info(
            "Parseo completo: %d transacciones, %d filas descartadas",
            num_accepted,
            num_skipped,
        )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        self._log.error("Error en %s: %s", file_path.name, error)

    def log_export_complete(self, output_path: Path) -> None:
        self._log.info("Salida generada: %s", output_path)

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_descartados": self._archivos_descartados,
            "reportes_procesados": self._reportes_procesados,
            "archivos_con_error": len(self._errores),
            "total_transacciones": self._total_transacciones,
            "filas_descartadas": self._filas_descartadas,
            "errores": self._errores,
        }
