"""
Adaptador de entrada: Mapper del layout de ATENDENTE.

Formato de la fila de datos (0-indexed, al menos 14 columnas):

    col 0  → cliente / unidad  ("Cliente X")
    col 4  → máquina/producto  ("Secadora 1")
    col 5  → forma de pago     ("Cartão")
    col 8  → venta en R$       ("12,00")
    col 12 → fecha             ("05/03/2024")
    col 13 → hora              ("09:15:00")

Este layout mezcla filas de datos con filas de subtotales y de
agrupamiento que tienen las mismas 14+ columnas. La regla para
distinguirlas: una fila de datos SIEMPRE trae una fecha en la columna
12. Sin '/' en esa columna, la fila se descarta.

El nombre de la unidad se toma de la columna 0 de la primera fila
válida, salvo que sea el rótulo "Cliente" del encabezado.
"""

from laundry_report.adapters.input.layout_mappers.positional_mapper import (
    ColumnMap,
    PositionalLayoutMapper,
)
from laundry_report.domain.models.layout import Layout
from laundry_report.domain.models.row_outcome import SkipReason
from laundry_report.domain.models.scan_limits import ScanLimits
from laundry_report.domain.shared.text_cleaner import clean_field

_HEADER_LABEL = "cliente"


class AttendantMapper(PositionalLayoutMapper):
    """Mapper de reportes de terminales operadas por atendente."""

    columns = ColumnMap(machine=4, amount=8, date=12, time=13, payment=5)
    min_columns = 14

    @property
    def layout(self) -> Layout:
        return Layout.ATTENDANT

    def _check_row(self, columns: list[str]) -> SkipReason | None:
        if "/" not in columns[self.columns.date]:
            return SkipReason.MISSING_DATE_TOKEN
        return None

    def find_unit_name(
        self, columns: list[str], lines: list[str], limits: ScanLimits
    ) -> str | None:
        name = clean_field(columns, 0)
        if not name or name.lower() == _HEADER_LABEL:
            return None
        return name
