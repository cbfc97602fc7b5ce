"""
Puerto de entrada: Mapeador de columnas por layout.

Hay exactamente un LayoutMapper por cada layout soportado:

    LayoutMapper (interfaz)
    ├── SelfServiceMapper
    └── AttendantMapper

Cada mapper sabe DOS cosas de su layout:
1. Qué posición tiene cada campo y qué filas son válidas.
2. Dónde vive el nombre de la unidad.

Lo común a todos los layouts (validar la fecha, normalizar el monto,
clasificar el ciclo, construir la Transaction) lo hace el ReportParser.
"""

from abc import ABC, abstractmethod

from laundry_report.domain.models.layout import Layout
from laundry_report.domain.models.row_outcome import RawRowFields, SkipReason
from laundry_report.domain.models.scan_limits import ScanLimits


class LayoutMapper(ABC):
    """Interfaz para extraer los campos crudos de una fila."""

    @property
    @abstractmethod
    def layout(self) -> Layout:
        """Layout que este mapper maneja. Clave en el LayoutMapperRegistry."""
        ...

    @abstractmethod
    def map_columns(self, columns: list[str]) -> RawRowFields | SkipReason:
        """Aplica la validación del layout y extrae los campos crudos.

        Args:
            columns: Columnas de la fila (ya divididas, con comillas).

        Returns:
            RawRowFields si la fila pasa las validaciones del layout.
            El SkipReason correspondiente si no.
        """
        ...

    @abstractmethod
    def find_unit_name(
        self, columns: list[str], lines: list[str], limits: ScanLimits
    ) -> str | None:
        """Busca el nombre de la unidad para una fila que pasó map_columns.

        El ReportParser solo lo llama mientras el nombre no se haya
        encontrado; el primer valor no vacío gana.

        Args:
            columns: Columnas de la fila actual.
            lines: Todas las líneas del reporte.
            limits: Cotas de escaneo.

        Returns:
            El nombre encontrado, o None.
        """
        ...
