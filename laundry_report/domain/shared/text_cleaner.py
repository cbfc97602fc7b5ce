"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto crudo del CSV antes de
que el ReportParser lo procese.

Estas funciones NO tienen lógica de negocio (no saben de layouts ni
montos). Solo operan sobre strings puros.
"""

import re

# Coma seguida de un número par de comillas hasta el final de la línea:
# es decir, una coma que NO está dentro de un campo entre comillas.
_CSV_SPLIT: re.Pattern[str] = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')

_LINE_BREAK: re.Pattern[str] = re.compile(r"\r\n|\n")


def split_lines(text: str) -> list[str]:
    """Divide el texto en líneas aceptando saltos \\r\\n y \\n mezclados."""
    return _LINE_BREAK.split(text)


def is_line_empty(line: str) -> bool:
    """Indica si una línea no tiene contenido útil.

    Una línea es "vacía" si solo tiene espacios o si, quitando todas las
    comas, solo quedan espacios. El exportador rellena el reporte con
    filas tipo ",,,,,,,,," que no aportan nada.

    Ejemplos:
        >>> is_line_empty("   ")
        True
        >>> is_line_empty(",,, ,,")
        True
        >>> is_line_empty(',"Lavadora 1",,')
        False
    """
    if not line or not line.strip():
        return True
    return not line.replace(",", "").strip()


def normalize_lines(text: str) -> list[str]:
    """Divide el texto en líneas y descarta las vacías.

    Conserva el orden original y el contenido de cada línea tal cual
    (sin strip): los detectores trabajan sobre el texto crudo.
    """
    return [line for line in split_lines(text) if not is_line_empty(line)]


def split_csv_line(line: str) -> list[str]:
    """Divide una línea CSV por comas, sin partir campos entre comillas.

    No es un parser CSV completo: no maneja comillas escapadas ni campos
    multilínea. Las comillas se conservan en cada campo; se limpian con
    clean_field().

    Ejemplos:
        >>> split_csv_line('a,"1.200,50",b')
        ['a', '"1.200,50"', 'b']
        >>> split_csv_line(",,")
        ['', '', '']
    """
    return _CSV_SPLIT.split(line)


def strip_quotes(text: str) -> str:
    """Elimina comillas simples y dobles en cualquier posición.

    Ejemplos:
        >>> strip_quotes('"Lavadora 3"')
        'Lavadora 3'
        >>> strip_quotes("'25,50'")
        '25,50'
    """
    return text.replace('"', "").replace("'", "")


def clean_field(columns: list[str], index: int, default: str = "") -> str:
    """Devuelve la columna `index` sin comillas ni espacios.

    Si la columna no existe o queda vacía después de limpiar, devuelve
    `default`.
    """
    if index >= len(columns):
        return default
    value = strip_quotes(columns[index]).strip()
    return value or default
