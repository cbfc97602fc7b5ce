"""
Modelo de dominio: Layout del reporte y tipo de ciclo.

El mismo exportador de las terminales de lavandería produce dos layouts
de columnas distintos ("autoservicio" y "atendente"). Solo se distinguen
por el texto del encabezado, así que el Layout se detecta una vez por
archivo y se reutiliza para cada fila.
"""

from enum import Enum


class Layout(str, Enum):
    """Esquema de posiciones de columnas que sigue un archivo."""

    SELF_SERVICE = "SELF_SERVICE"
    ATTENDANT = "ATTENDANT"
    UNKNOWN = "UNKNOWN"


class CycleType(str, Enum):
    """Clasificación del nombre de la máquina: lavado, secado o desconocido."""

    WASH = "WASH"
    DRY = "DRY"
    UNKNOWN = "UNKNOWN"


class ReportType(str, Enum):
    """Tipo de reporte expuesto en los metadatos.

    Solo tiene dos valores: un Layout UNKNOWN se reporta como
    SELF_SERVICE (ver report_type_for).
    """

    SELF_SERVICE = "SELF_SERVICE"
    ATTENDANT = "ATTENDANT"


def report_type_for(layout: Layout) -> ReportType:
    """ATTENDANT → ATTENDANT; cualquier otro (incluido UNKNOWN) → SELF_SERVICE.

    Los consumidores actuales del reporte dependen de este default, por eso
    no existe un ReportType.UNKNOWN.
    """
    if layout is Layout.ATTENDANT:
        return ReportType.ATTENDANT
    return ReportType.SELF_SERVICE
