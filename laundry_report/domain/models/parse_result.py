"""
Modelo de dominio: Resultado completo del parseo de un reporte.

Es el contrato entre el motor de parseo y todo lo demás:
- Lo PRODUCE ReportParser.parse().
- Lo CONSUMEN el ExcelWriter y el resumen de la CLI.

El parseo nunca falla: un archivo irreconocible produce un ParseResult
con metadatos default y lista vacía. El consumidor debe revisar
`transactions` y `metadata` para detectar un parseo malo.
"""

from dataclasses import dataclass, field

from laundry_report.domain.models.dashboard_metadata import DashboardMetadata
from laundry_report.domain.models.transaction import Transaction


@dataclass(frozen=True)
class ParseResult:
    """Metadatos + transacciones en el orden de las filas del archivo."""

    metadata: DashboardMetadata
    """Unidad, periodo y tipo de reporte."""

    transactions: list[Transaction] = field(default_factory=list)
    """Transacciones aceptadas, en orden de aparición. No se deduplican."""

    @property
    def is_empty(self) -> bool:
        return not self.transactions
