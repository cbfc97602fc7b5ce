"""
Servicio de dominio: Procesador de archivos de reporte.

Orquesta el flujo completo para un archivo:
1. Recibe una ruta a un archivo.
2. Selecciona el ReportReader adecuado (can_handle).
3. Lee el texto.
4. Lo pasa al ReportParser y devuelve el ParseResult.

¿Por qué no poner esta lógica en el CLI?
Porque "dado un archivo, producir transacciones" es una regla del
dominio. El CLI solo decide QUÉ archivos procesar y DÓNDE guardar.
"""

from collections.abc import Sequence
from pathlib import Path

from laundry_report.domain.exceptions import ReportBaseError
from laundry_report.domain.models.parse_result import ParseResult
from laundry_report.domain.ports.process_logger import ProcessLogger
from laundry_report.domain.ports.report_reader import ReportReader
from laundry_report.domain.services.report_parser import ReportParser


class ReportProcessor:
    """Procesa archivos de reporte y produce ParseResult.

    Recibe sus dependencias por constructor. No sabe qué lectores
    concretos se usan: solo conoce el puerto ReportReader.
    """

    def __init__(
        self,
        readers: Sequence[ReportReader],
        parser: ReportParser,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            readers: Lectores disponibles, en orden de prioridad. Se usa
                     el primero cuyo can_handle devuelva True.
            parser: Parser de reportes ya configurado.
            logger: Logger para la bitácora de procesamiento.
        """
        self._readers = readers
        self._parser = parser
        self._logger = logger

    def process_file(self, file_path: Path) -> ParseResult | None:
        """Procesa un archivo y devuelve el resultado.

        Returns:
            ParseResult si el archivo se pudo leer (aunque no tenga
            transacciones). None si fue descartado o no se pudo leer.
        """
        self._logger.log_file_received(file_path)

        reader = self._find_reader(file_path)
        if reader is None:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún lector puede manejar '{file_path.suffix}'",
            )
            return None

        try:
            texto = reader.read(file_path)
        except ReportBaseError as e:
            self._logger.log_error(file_path, e)
            return None

        return self._parser.parse(texto)

    def process_directory(self, dir_path: Path) -> list[tuple[Path, ParseResult]]:
        """Procesa todos los reportes de un directorio (recursivo).

        Returns:
            Pares (ruta, resultado) solo de los archivos leídos con éxito,
            en orden alfabético de ruta.

        Raises:
            ValueError: Si dir_path no es un directorio.
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            p for p in dir_path.glob("**/*") if p.is_file() and self._find_reader(p)
        )

        resultados: list[tuple[Path, ParseResult]] = []
        for archivo in archivos:
            resultado = self.process_file(archivo)
            if resultado is not None:
                resultados.append((archivo, resultado))

        return resultados

    def _find_reader(self, file_path: Path) -> ReportReader | None:
        """Encuentra el primer lector que pueda manejar el archivo."""
        for reader in self._readers:
            if reader.can_handle(file_path):
                return reader
        return None
