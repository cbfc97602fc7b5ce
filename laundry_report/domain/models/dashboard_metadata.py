"""
Modelo de dominio: Metadatos del reporte.

Se calculan una sola vez por parseo y no cambian después. Cuando el
reporte no trae la información se usan textos fijos legibles, para que
el consumidor pueda detectar un parseo incompleto comparando contra
los defaults.
"""

from dataclasses import dataclass

from laundry_report.domain.models.layout import ReportType

DEFAULT_UNIT_NAME = "Unidade Desconhecida"
DEFAULT_PERIOD = "Período não identificado"


@dataclass(frozen=True)
class DashboardMetadata:
    """Unidad operadora, periodo y tipo de reporte."""

    unit_name: str = DEFAULT_UNIT_NAME
    """Nombre de la unidad (lavandería). Default si no se encontró."""

    period: str = DEFAULT_PERIOD
    """Periodo del reporte. Ejemplo: '01/03/2024 - 31/03/2024'."""

    report_type: ReportType = ReportType.SELF_SERVICE
    """SELF_SERVICE o ATTENDANT."""

    @property
    def has_unit_name(self) -> bool:
        return self.unit_name != DEFAULT_UNIT_NAME

    @property
    def has_period(self) -> bool:
        return self.period != DEFAULT_PERIOD
