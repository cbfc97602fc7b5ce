"""
Puerto de entrada: Detector de layout.

Define el contrato para determinar qué layout de columnas usa un
reporte, basándose en el texto de sus líneas.

La implementación actual es por firmas (substrings que deben aparecer
juntos en una misma línea), pero la interfaz permite otras estrategias.
"""

from abc import ABC, abstractmethod

from laundry_report.domain.models.layout import Layout


class LayoutDetector(ABC):
    """Interfaz para identificar el layout de un reporte."""

    @abstractmethod
    def detect(self, lines: list[str], max_lines: int) -> Layout:
        """Identifica el layout revisando como máximo `max_lines` líneas.

        Args:
            lines: Líneas del reporte ya normalizadas (sin vacías).
            max_lines: Cota del escaneo.

        Returns:
            El Layout detectado, o Layout.UNKNOWN si ninguna firma aparece.
        """
        ...
