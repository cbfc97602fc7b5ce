"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los resultados del parseo en algún
formato persistente. Hoy es Excel; el dominio no lo sabe: solo produce
un ParseResult y lo pasa a quien implemente este puerto.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from laundry_report.domain.models.parse_result import ParseResult


class OutputWriter(ABC):
    """Interfaz para escribir resultados de parseo."""

    @abstractmethod
    def write_single(
        self, resultado: ParseResult, output_path: Path, source_name: str = ""
    ) -> Path:
        """Escribe el resultado de un solo reporte.

        Args:
            resultado: Resultado del parseo.
            output_path: Ruta donde crear el archivo de salida.
            source_name: Nombre del archivo original, para trazabilidad.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @abstractmethod
    def write_consolidated(
        self, resultados: list[tuple[str, ParseResult]], output_path: Path
    ) -> Path:
        """Escribe la consolidación de varios reportes en un solo archivo.

        Args:
            resultados: Pares (nombre del archivo original, resultado).
            output_path: Ruta donde crear el archivo consolidado.

        Returns:
            Ruta real del archivo creado.

        Raises:
            OutputError: Si falla la escritura o no hay resultados.
        """
        ...
