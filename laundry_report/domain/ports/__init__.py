"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from laundry_report.domain.ports import LayoutDetector, LayoutMapper, ProcessLogger
"""

from laundry_report.domain.ports.layout_detector import LayoutDetector
from laundry_report.domain.ports.layout_mapper import LayoutMapper
from laundry_report.domain.ports.output_writer import OutputWriter
from laundry_report.domain.ports.process_logger import ProcessLogger
from laundry_report.domain.ports.report_reader import ReportReader

__all__ = [
    "LayoutDetector",
    "LayoutMapper",
    "OutputWriter",
    "ProcessLogger",
    "ReportReader",
]
