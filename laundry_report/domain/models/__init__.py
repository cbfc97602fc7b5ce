"""
Modelos de dominio del proyecto laundry-report-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from laundry_report.domain.models import Transaction, ParseResult, Layout
"""

from laundry_report.domain.models.dashboard_metadata import (
    DEFAULT_PERIOD,
    DEFAULT_UNIT_NAME,
    DashboardMetadata,
)
from laundry_report.domain.models.layout import CycleType, Layout, ReportType
from laundry_report.domain.models.parse_result import ParseResult
from laundry_report.domain.models.report_summary import ReportSummary, summarize
from laundry_report.domain.models.row_outcome import (
    Accepted,
    RawRowFields,
    RowOutcome,
    SkipReason,
    Skipped,
)
from laundry_report.domain.models.scan_limits import ScanLimits
from laundry_report.domain.models.transaction import Transaction

__all__ = [
    "Accepted",
    "CycleType",
    "DEFAULT_PERIOD",
    "DEFAULT_UNIT_NAME",
    "DashboardMetadata",
    "Layout",
    "ParseResult",
    "RawRowFields",
    "ReportSummary",
    "ReportType",
    "RowOutcome",
    "ScanLimits",
    "SkipReason",
    "Skipped",
    "Transaction",
    "summarize",
]
