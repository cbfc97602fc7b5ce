"""
Utilidades para manejo de montos en reales (BRL).

CONTEXTO DEL PROBLEMA:
El exportador de las terminales escribe los montos con formato brasileño
y sin ninguna consistencia entre versiones:

- "R$ 15,90"    → con símbolo y coma decimal
- "\"1.200,50\"" → entre comillas, punto de miles y coma decimal
- "15.9"        → punto decimal (exportaciones viejas)
- "15"          → entero
- ""            → celda vacía

SOLUCIÓN:
Una sola función tolerante que:
1. Siempre devuelve Decimal (nunca float, nunca NaN).
2. Nunca lanza excepción: un monto ilegible vale Decimal("0") y la fila
   se conserva. Perder una venta entera por un monto sucio es peor que
   reportarla en cero.
"""

import re
from decimal import Decimal, InvalidOperation

from laundry_report.domain.shared.text_cleaner import strip_quotes

# Prefijo numérico más largo que se puede leer como decimal.
# "15.9abc" → "15.9"; "abc" → sin match.
_LEADING_NUMBER: re.Pattern[str] = re.compile(
    r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)


def parse_currency(text: str | None) -> Decimal:
    """Convierte un monto en formato brasileño a Decimal.

    Pasos:
    1. Quitar comillas y el símbolo "R$", hacer strip.
    2. Si el texto tiene '.' y ',' a la vez, los puntos son separadores
       de miles y se eliminan: "1.200,50" → "1200,50".
    3. La primera coma se vuelve punto decimal: "1200,50" → "1200.50".
    4. Se lee el prefijo numérico; si no hay, Decimal("0").

    Ejemplos:
        >>> parse_currency("R$ 15,90")
        Decimal('15.90')
        >>> parse_currency('"1.200,50"')
        Decimal('1200.50')
        >>> parse_currency("15.9")
        Decimal('15.9')
        >>> parse_currency("")
        Decimal('0')
        >>> parse_currency("abc")
        Decimal('0')
    """
    if not text:
        return Decimal("0")

    cleaned = strip_quotes(text).replace("R$", "", 1).strip()

    if "." in cleaned and "," in cleaned:
        cleaned = cleaned.replace(".", "")

    cleaned = cleaned.replace(",", ".", 1)

    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return Decimal("0")

    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return Decimal("0")


def format_brl(amount: Decimal) -> str:
    """Formatea un Decimal como monto brasileño legible.

    Útil para la bitácora y el resumen de la CLI.

    Ejemplos:
        >>> format_brl(Decimal("1200.5"))
        'R$ 1.200,50'
        >>> format_brl(Decimal("0"))
        'R$ 0,00'
        >>> format_brl(Decimal("-15.9"))
        '-R$ 15,90'
    """
    amount = amount.quantize(Decimal("0.01"))
    # Se formatea al estilo en_US y luego se intercambian los separadores
    texto = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    if amount < 0:
        return f"-R$ {texto}"
    return f"R$ {texto}"

