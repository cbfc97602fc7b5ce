"""
Adaptador de entrada: Mapper del layout de AUTOSERVICIO.

Formato de la fila de datos (0-indexed, al menos 12 columnas):

    col 4  → forma de pago     ("Dinheiro", "Cartão", "Pix")
    col 6  → máquina/producto  ("Lavadora 3")
    col 9  → total de la venta ("25,50")
    col 10 → fecha             ("01/03/2024")
    col 11 → hora              ("14:30:00")

El nombre de la unidad NO está en las filas: viene en una línea del
banner con la forma 'Operador:,"Lavanderia Centro",...', siempre en
las primeras líneas del archivo.
"""

from laundry_report.adapters.input.layout_mappers.positional_mapper import (
    ColumnMap,
    PositionalLayoutMapper,
)
from laundry_report.domain.models.layout import Layout
from laundry_report.domain.models.scan_limits import ScanLimits
from laundry_report.domain.shared.text_cleaner import clean_field, split_csv_line

_OPERATOR_PREFIX = "Operador:"


class SelfServiceMapper(PositionalLayoutMapper):
    """Mapper de reportes de terminales de autoservicio."""

    columns = ColumnMap(machine=6, amount=9, date=10, time=11, payment=4)
    min_columns = 12

    @property
    def layout(self) -> Layout:
        return Layout.SELF_SERVICE

    def find_unit_name(
        self, columns: list[str], lines: list[str], limits: ScanLimits
    ) -> str | None:
        """Busca la línea 'Operador:' en las primeras líneas del reporte.

        La fila actual no se usa. Se toma el campo 1 de la primera línea
        'Operador:' que lo tenga con contenido. Una línea 'Operador:,""' no
        cierra la búsqueda: se sigue con la siguiente.
        """
        for line in lines[: limits.operator_scan_lines]:
            if not line.startswith(_OPERATOR_PREFIX):
                continue
            name = clean_field(split_csv_line(line), 1)
            if name:
                return name
        return None
