"""
Servicio de dominio: Parser de reportes de terminales de lavandería.

Convierte el texto de un reporte CSV en un ParseResult:
1. Normaliza las líneas (descarta vacías y filas de solo comas).
2. Detecta el layout (LayoutDetector).
3. Extrae el periodo ("Vendas de ...").
4. Localiza la fila de encabezado ("Data" + "Hora").
5. Mapea cada fila de datos con el LayoutMapper del layout detectado,
   valida la fecha y normaliza monto, fecha/hora y tipo de ciclo.
6. Arma metadatos + transacciones.

El parseo es tolerante: nunca lanza excepciones. Un archivo irreconocible
produce un ParseResult con metadatos default y cero transacciones. Cada
fila descartada queda registrada como Skipped(reason) en los RowOutcome.

No guarda estado entre llamadas: la misma instancia puede usarse desde
varios hilos a la vez.
"""

from laundry_report.domain.models.dashboard_metadata import DEFAULT_PERIOD, DashboardMetadata
from laundry_report.domain.models.layout import Layout, report_type_for
from laundry_report.domain.models.parse_result import ParseResult
from laundry_report.domain.models.row_outcome import (
    Accepted,
    RawRowFields,
    RowOutcome,
    SkipReason,
    Skipped,
)
from laundry_report.domain.models.scan_limits import ScanLimits
from laundry_report.domain.models.transaction import Transaction
from laundry_report.domain.ports.layout_detector import LayoutDetector
from laundry_report.domain.ports.process_logger import ProcessLogger
from laundry_report.domain.services.unit_name import UnitNameAccumulator
from laundry_report.domain.shared.cycle_classifier import classify_cycle
from laundry_report.domain.shared.date_parser import (
    day_of_week,
    is_report_date,
    parse_report_datetime,
)
from laundry_report.domain.shared.money import parse_currency
from laundry_report.domain.shared.text_cleaner import normalize_lines, split_csv_line
from laundry_report.infrastructure.registry import LayoutMapperRegistry

_PERIOD_MARKER = "Vendas de"
_HEADER_TOKENS = ("Data", "Hora")
_FOOTER_PREFIX = "Total"


class ReportParser:
    """Parsea el texto de un reporte y produce un ParseResult.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué layouts concretos existen: pide al registro el mapper
    del layout que devolvió el detector.
    """

    def __init__(
        self,
        layout_detector: LayoutDetector,
        mapper_registry: LayoutMapperRegistry,
        logger: ProcessLogger,
        limits: ScanLimits | None = None,
    ) -> None:
        """
        Args:
            layout_detector: Detector de layout por firmas.
            mapper_registry: Registro Layout → LayoutMapper.
            logger: Canal de diagnóstico.
            limits: Cotas de escaneo. Default: 5000 / 50 líneas.
        """
        self._detector = layout_detector
        self._registry = mapper_registry
        self._logger = logger
        self._limits = limits or ScanLimits()

    @property
    def limits(self) -> ScanLimits:
        return self._limits

    def parse(self, text: str) -> ParseResult:
        """Parsea el reporte completo. Nunca lanza excepciones."""
        resultado, _ = self.parse_with_outcomes(text)
        return resultado

    def parse_with_outcomes(self, text: str) -> tuple[ParseResult, list[RowOutcome]]:
        """Igual que parse(), pero devuelve también el destino de cada fila.

        Returns:
            (ParseResult, lista de Accepted/Skipped en orden de fila).
        """
        lines = normalize_lines(text or "")

        layout = self._detector.detect(lines, self._limits.format_scan_lines)
        self._logger.log_layout_detected(layout)

        period = self.extract_period(lines, self._limits.format_scan_lines)

        header_index = self.find_header_index(lines)
        if header_index is None and layout is not Layout.UNKNOWN:
            self._logger.log_header_not_found(layout)
        start_index = 0 if header_index is None else header_index + 1

        unit_name = UnitNameAccumulator()
        outcomes = [
            self._map_line(i, lines, layout, unit_name)
            for i in range(start_index, len(lines))
        ]

        transactions = [o.transaction for o in outcomes if isinstance(o, Accepted)]
        self._logger.log_parse_complete(len(transactions), len(outcomes) - len(transactions))

        metadata = DashboardMetadata(
            unit_name=unit_name.value,
            period=period,
            report_type=report_type_for(layout),
        )
        return ParseResult(metadata=metadata, transactions=transactions), outcomes

    # =================================================================
    # Escaneos sobre la lista de líneas
    # =================================================================

    @staticmethod
    def find_header_index(lines: list[str]) -> int | None:
        """Índice de la primera línea con "Data" y "Hora", o None.

        Escanea la lista completa: el bloque de banner/metadatos que
        precede al encabezado tiene largo variable según la exportación.
        """
        for i, line in enumerate(lines):
            if all(token in line for token in _HEADER_TOKENS):
                return i
        return None

    @staticmethod
    def extract_period(lines: list[str], max_lines: int) -> str:
        """Extrae el periodo de la primera línea con "Vendas de".

        Ejemplo: 'Vendas de 01/03/2024 ate 31/03/2024,,,' →
        '01/03/2024 - 31/03/2024'.
        """
        for line in lines[:max_lines]:
            if _PERIOD_MARKER not in line:
                continue
            for part in line.split(","):
                if _PERIOD_MARKER in part:
                    return (
                        part.replace(f"{_PERIOD_MARKER} ", "", 1)
                        .replace(" ate ", " - ", 1)
                        .replace('"', "")
                        .replace("'", "")
                        .strip()
                    )
        return DEFAULT_PERIOD

    # =================================================================
    # Mapeo de filas
    # =================================================================

    def _map_line(
        self,
        index: int,
        lines: list[str],
        layout: Layout,
        unit_name: UnitNameAccumulator,
    ) -> RowOutcome:
        """Convierte una línea en Accepted o Skipped."""
        line = lines[index].strip()

        if line.startswith(_FOOTER_PREFIX):
            return Skipped(index, SkipReason.FOOTER)

        mapper = self._registry.get(layout)
        if mapper is None:
            return Skipped(index, SkipReason.UNKNOWN_LAYOUT)

        columns = split_csv_line(line)
        fields = mapper.map_columns(columns)
        if isinstance(fields, SkipReason):
            return Skipped(index, fields)

        if not unit_name.is_set:
            unit_name.offer(mapper.find_unit_name(columns, lines, self._limits))

        transaction = self._build_transaction(index, fields)
        if transaction is None:
            return Skipped(index, SkipReason.INVALID_DATE)
        return Accepted(index, transaction)

    @staticmethod
    def _build_transaction(index: int, fields: RawRowFields) -> Transaction | None:
        """Validación y normalización comunes a todos los layouts.

        Returns:
            La Transaction, o None si la fecha/hora no es válida.
        """
        if not is_report_date(fields.date):
            return None

        try:
            moment = parse_report_datetime(fields.date, fields.time)
        except ValueError:
            # 31/02/2024, 25:00:00, etc.: se descarta la fila, no el archivo
            return None

        return Transaction(
            id=f"{index}-{fields.date}-{fields.time}-{fields.machine}",
            date=moment,
            raw_date=fields.date,
            raw_time=fields.time,
            product_name=fields.machine,
            cycle_type=classify_cycle(fields.machine),
            amount=parse_currency(fields.amount),
            payment_method=fields.payment,
            machine=fields.machine,
            day_of_week=day_of_week(moment),
        )
