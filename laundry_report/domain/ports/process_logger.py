"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el procesamiento de
reportes. Es también el canal de diagnóstico del ReportParser: el aviso
"se detectó el layout pero no el encabezado" sale por aquí y nunca
cambia el resultado del parseo.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se detectó el layout ATTENDANT" (no "INFO: layout")
- "No se encontró la fila de encabezado" (no "WARNING: header")

La implementación puede usar `logging` internamente (StdlibProcessLogger),
imprimir a consola (ConsoleLogger) o acumular en memoria en los tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from laundry_report.domain.models.layout import Layout


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Extensión .xlsx no soportada"
        """
        ...

    # --- Parseo ---

    @abstractmethod
    def log_layout_detected(self, layout: Layout) -> None:
        """Registra el layout detectado (incluido UNKNOWN)."""
        ...

    @abstractmethod
    def log_header_not_found(self, layout: Layout) -> None:
        """Aviso no fatal: hay layout pero no fila de encabezado.

        El parseo continúa desde la línea 0; puede recuperar todas las
        filas o no, según cómo esté armado el archivo.
        """
        ...

    @abstractmethod
    def log_parse_complete(self, num_accepted: int, num_skipped: int) -> None:
        """Registra el fin del parseo de un reporte.

        Args:
            num_accepted: Filas convertidas en Transaction.
            num_skipped: Filas de datos descartadas.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error durante el procesamiento de un archivo."""
        ...

    # --- Salida ---

    @abstractmethod
    def log_export_complete(self, output_path: Path) -> None:
        """Registra que se generó un archivo de salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_descartados': int,
                'reportes_procesados': int,
                'archivos_con_error': int,
                'total_transacciones': int,
                'filas_descartadas': int,
                'errores': list[dict],  # [{archivo, error}]
            }
        """
        ...
