"""
Conversión de fecha y hora del reporte a datetime.

El exportador siempre escribe la fecha como DD/MM/YYYY y la hora como
HH:MM:SS (reloj de 24 horas), en la hora local de la terminal. No hay
zona horaria: el datetime resultante es "naive" y sus campos coinciden
uno a uno con el texto original.

No hay "roll-over": 31/02/2024 o 24:00:00 no se convierten en el día
siguiente sino que se rechazan con ValueError, y la fila se descarta.
Así raw_date/raw_time siempre coinciden con el datetime construido.
"""

import re
from datetime import datetime

_REPORT_DATE: re.Pattern[str] = re.compile(r"^\d{2}/\d{2}/\d{4}$", re.ASCII)

_LEADING_INT: re.Pattern[str] = re.compile(r"^\s*([+-]?\d+)", re.ASCII)

DEFAULT_TIME = "00:00:00"


def is_report_date(text: str) -> bool:
    """Indica si el texto tiene exactamente la forma DD/DD/DDDD.

    Ejemplos:
        >>> is_report_date("01/03/2024")
        True
        >>> is_report_date("1/3/2024")
        False
        >>> is_report_date("01/03/24")
        False
    """
    return bool(text) and bool(_REPORT_DATE.match(text))


def parse_report_datetime(date_text: str, time_text: str = DEFAULT_TIME) -> datetime:
    """Construye el datetime de una transacción.

    Args:
        date_text: Fecha DD/MM/YYYY (ya validada con is_report_date).
        time_text: Hora HH:MM:SS. Componentes faltantes o no numéricos
                   valen 0: "14:30" → 14:30:00, "" → 00:00:00.

    Returns:
        datetime sin zona horaria.

    Raises:
        ValueError: Si la fecha no tiene la forma esperada o no existe en
                    el calendario (ej: 31/02/2024), o si la hora está
                    fuera de rango.

    Ejemplos:
        >>> parse_report_datetime("05/03/2024", "09:15:00")
        datetime.datetime(2024, 3, 5, 9, 15)
    """
    if not is_report_date(date_text):
        raise ValueError(f"Formato de fecha no reconocido: '{date_text}'. Se esperaba DD/MM/YYYY")

    day, month, year = (int(part) for part in date_text.split("/"))
    hour, minute, second = _split_time(time_text)

    try:
        return datetime(year, month, day, hour, minute, second)
    except (ValueError, OverflowError) as e:
        raise ValueError(
            f"Fecha inválida construida de '{date_text} {time_text}': "
            f"año={year}, mes={month}, día={day}, "
            f"hora={hour}:{minute}:{second} — {e}"
        )


def day_of_week(moment: datetime) -> int:
    """Día de la semana con domingo = 0 ... sábado = 6.

    Python usa lunes = 0 (weekday()); el reporte y sus consumidores
    cuentan la semana a partir del domingo.
    """
    return (moment.weekday() + 1) % 7


# ============================================================
# FUNCIONES INTERNAS (prefijo _ = no exportadas)
# ============================================================


def _split_time(time_text: str) -> tuple[int, int, int]:
    """Separa HH:MM:SS en enteros, con 0 para lo que falte."""
    parts = (time_text or DEFAULT_TIME).split(":")
    values = [_leading_int(part) for part in parts[:3]]
    values.extend([0] * (3 - len(values)))
    return values[0], values[1], values[2]


def _leading_int(text: str) -> int:
    """Lee el entero al inicio del texto: "09" → 9, "30s" → 30, "" → 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0
