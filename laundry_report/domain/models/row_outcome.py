"""
Modelo de dominio: Resultado del procesamiento de una fila.

El parseo descarta filas en silencio (pies de página, filas cortas,
fechas inválidas...). Para que esos descartes se puedan inspeccionar en
tests y en la bitácora, cada fila produce un RowOutcome:

    RowOutcome
    ├── Accepted(line_index, transaction)
    └── Skipped(line_index, reason)

Solo los Accepted llegan al ParseResult.
"""

from dataclasses import dataclass
from enum import Enum

from laundry_report.domain.models.transaction import Transaction


class SkipReason(str, Enum):
    """Motivo por el que una fila no se convirtió en Transaction."""

    FOOTER = "FOOTER"
    """La fila empieza con 'Total' (subtotal o pie del reporte)."""

    TOO_FEW_COLUMNS = "TOO_FEW_COLUMNS"
    """Menos columnas que el mínimo del layout."""

    MISSING_DATE_TOKEN = "MISSING_DATE_TOKEN"
    """ATTENDANT: la columna de fecha no contiene '/'."""

    INVALID_DATE = "INVALID_DATE"
    """La fecha no es DD/MM/YYYY o no existe en el calendario."""

    UNKNOWN_LAYOUT = "UNKNOWN_LAYOUT"
    """No se detectó layout, no hay forma de mapear columnas."""


@dataclass(frozen=True)
class RawRowFields:
    """Campos crudos de una fila, ya limpios de comillas y espacios.

    Es lo que entrega un LayoutMapper antes de la normalización común
    (fecha, hora, monto, tipo de ciclo).
    """

    machine: str
    amount: str
    date: str
    time: str
    payment: str


@dataclass(frozen=True)
class Accepted:
    line_index: int
    transaction: Transaction


@dataclass(frozen=True)
class Skipped:
    line_index: int
    reason: SkipReason


RowOutcome = Accepted | Skipped
