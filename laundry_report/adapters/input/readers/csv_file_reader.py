"""
Adaptador de entrada: Lector de reportes CSV.

El exportador de las terminales genera archivos en UTF-8 en las
versiones nuevas y en Windows-1252/Latin-1 en las viejas ("Cartão",
"Período" salen con bytes distintos). Este adaptador:
1. Lee los bytes del archivo.
2. Intenta UTF-8 (con o sin BOM).
3. Si falla, usa el encoding que detecta chardet.
4. Como último recurso, Latin-1 (nunca falla: cada byte es un carácter).

Los saltos de línea NO se tocan: el ReportParser acepta \\n y \\r\\n.
"""

from pathlib import Path

import chardet

from laundry_report.domain.exceptions import ExtractionError, FormatoInvalidoError
from laundry_report.domain.ports.report_reader import ReportReader

_SUPPORTED_SUFFIXES = (".csv", ".txt")


class CsvFileReader(ReportReader):
    """Lee archivos .csv/.txt exportados por las terminales."""

    @property
    def name(self) -> str:
        return "csv-file"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in _SUPPORTED_SUFFIXES

    def read(self, file_path: Path) -> str:
        """Lee el archivo y lo decodifica.

        Raises:
            FormatoInvalidoError: Si el archivo no existe o no es .csv/.txt.
            ExtractionError: Si no se puede leer o parece binario.
        """
        if not file_path.is_file():
            raise FormatoInvalidoError(str(file_path), "archivo .csv", "El archivo no existe")
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path),
                "archivo .csv",
                f"Extensión {file_path.suffix or '(sin extensión)'} no soportada",
            )

        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise ExtractionError(str(file_path), str(e))

        if b"\x00" in raw:
            raise ExtractionError(str(file_path), "El archivo parece binario (bytes nulos)")

        return self.decode(raw)

    @staticmethod
    def decode(raw: bytes) -> str:
        """Decodifica bytes probando UTF-8, luego chardet, luego Latin-1."""
        if not raw:
            return ""

        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            pass

        detected = chardet.detect(raw).get("encoding")
        if detected:
            try:
                return raw.decode(detected)
            except (LookupError, UnicodeDecodeError):
                pass

        return raw.decode("latin-1")
