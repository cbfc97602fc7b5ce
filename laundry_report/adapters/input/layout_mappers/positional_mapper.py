"""
Base común de los mappers de layouts posicionales.

Los dos layouts del exportador son posicionales: cada campo está en un
índice fijo de columna. Lo único que cambia entre layouts es la tabla
de índices, el mínimo de columnas y las validaciones extra de fila.
"""

from dataclasses import dataclass

from laundry_report.domain.models.row_outcome import RawRowFields, SkipReason
from laundry_report.domain.ports.layout_mapper import LayoutMapper
from laundry_report.domain.shared.date_parser import DEFAULT_TIME
from laundry_report.domain.shared.text_cleaner import clean_field


@dataclass(frozen=True)
class ColumnMap:
    """Índice (0-based) de cada campo dentro de la fila."""

    machine: int
    amount: int
    date: int
    time: int
    payment: int


class PositionalLayoutMapper(LayoutMapper):
    """LayoutMapper basado en una tabla de índices de columna.

    Las subclases definen `columns`, `min_columns`, `layout` y
    `find_unit_name`; opcionalmente `_check_row` para validaciones
    propias del layout.
    """

    columns: ColumnMap
    min_columns: int

    def map_columns(self, columns: list[str]) -> RawRowFields | SkipReason:
        if len(columns) < self.min_columns:
            return SkipReason.TOO_FEW_COLUMNS

        reason = self._check_row(columns)
        if reason is not None:
            return reason

        return RawRowFields(
            machine=clean_field(columns, self.columns.machine),
            amount=clean_field(columns, self.columns.amount, "0"),
            date=clean_field(columns, self.columns.date),
            time=clean_field(columns, self.columns.time, DEFAULT_TIME),
            payment=clean_field(columns, self.columns.payment),
        )

    def _check_row(self, columns: list[str]) -> SkipReason | None:
        """Validación extra del layout. Por defecto, ninguna."""
        return None
