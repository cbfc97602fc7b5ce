"""
Excepciones de dominio del proyecto laundry-report-parser.

El motor de parseo (ReportParser) NUNCA lanza excepciones: un archivo
irreconocible produce un resultado vacío. Estas excepciones son para los
adaptadores que tocan el sistema de archivos (lectura del CSV, escritura
del Excel), de modo que el ReportProcessor pueda distinguir "el archivo
no es un CSV" de "no pude decodificarlo" y registrar cada caso.

Jerarquía:
    ReportBaseError
    ├── FormatoInvalidoError        → El archivo no tiene el formato esperado
    ├── ExtractionError             → Error al leer/decodificar el archivo
    └── OutputError                 → Error al generar el archivo de salida
"""


class ReportBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar CUALQUIER error del proyecto con un solo
    `except ReportBaseError` en el procesador o en la CLI.
    """


class FormatoInvalidoError(ReportBaseError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un .csv pero el archivo es un .xlsx.
    - La ruta no existe.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(ReportBaseError):
    """Se lanza cuando no se puede leer el texto de un archivo.

    Esto puede pasar porque:
    - No hay permisos de lectura.
    - El archivo está vacío o es binario.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class OutputError(ReportBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
