"""
Ensamblado por defecto del ReportParser.

Punto de entrada para quien usa el proyecto como librería:

    from laundry_report.infrastructure.factory import parse_report

    resultado = parse_report(texto_csv)
    resultado.metadata.unit_name
    resultado.transactions

La CLI arma sus propias piezas (ConsoleLogger en vez de logging).
"""

from laundry_report.adapters.input.layout_detectors.signature_detector import (
    SignatureLayoutDetector,
)
from laundry_report.adapters.output.loggers.stdlib_logger import StdlibProcessLogger
from laundry_report.domain.models.parse_result import ParseResult
from laundry_report.domain.models.scan_limits import ScanLimits
from laundry_report.domain.ports.process_logger import ProcessLogger
from laundry_report.domain.services.report_parser import ReportParser
from laundry_report.infrastructure.registry import create_default_registry


def create_default_parser(
    logger: ProcessLogger | None = None,
    limits: ScanLimits | None = None,
) -> ReportParser:
    """Crea un ReportParser con el detector por firmas y todos los mappers.

    Args:
        logger: Bitácora. Default: StdlibProcessLogger (módulo logging).
        limits: Cotas de escaneo. Default: ScanLimits().
    """
    return ReportParser(
        layout_detector=SignatureLayoutDetector(),
        mapper_registry=create_default_registry(),
        logger=logger or StdlibProcessLogger(),
        limits=limits,
    )


def parse_report(text: str) -> ParseResult:
    """Parsea el texto de un reporte con la configuración por defecto."""
    return create_default_parser().parse(text)
