"""
Puerto de entrada: Lector de reportes.

Define el contrato para obtener el texto de un reporte exportado por
las terminales. El ReportParser solo trabaja con texto; leer bytes y
decodificarlos es responsabilidad de un adaptador:

    ReportReader (interfaz)
    └── CsvFileReader      → .csv / .txt con detección de encoding

¿Por qué es una Abstract Base Class (ABC)?
Porque queremos que Python lance un error si alguien crea un adaptador
que no implementa todos los métodos.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ReportReader(ABC):
    """Interfaz para leer el texto de un reporte."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este lector puede manejar el archivo dado."""
        ...

    @abstractmethod
    def read(self, file_path: Path) -> str:
        """Lee el archivo completo y lo devuelve como texto.

        Raises:
            FormatoInvalidoError: Si el archivo no existe o no es soportado.
            ExtractionError: Si no se puede leer o decodificar.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del lector. Para logging y debugging."""
        ...
