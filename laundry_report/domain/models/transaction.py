"""
Modelo de dominio: Transacción de una terminal de lavandería.

Una Transaction es una venta individual: un ciclo de lavado o secado
cobrado en una máquina, con su fecha/hora, monto y forma de pago.

Decisiones de diseño:
- `amount` es `Decimal`, igual que en el resto de montos del proyecto.
  Un monto no parseable llega aquí como Decimal("0"), nunca como NaN.
- `date` es `datetime` sin zona horaria: el reporte trae fecha y hora
  locales de la terminal y no se convierten a ninguna otra zona.
- Se conservan `raw_date` y `raw_time` tal como venían en el CSV para
  poder reconstruir (y auditar) el timestamp.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from laundry_report.domain.models.layout import CycleType


@dataclass(frozen=True)
class Transaction:
    """Venta individual extraída de una fila del reporte."""

    id: str
    """Identificador '{índice_línea}-{fecha}-{hora}-{máquina}'.
    Único dentro de un mismo parseo (best-effort), determinista."""

    date: datetime
    """Timestamp construido a partir de raw_date + raw_time (DD/MM/YYYY, 24h)."""

    raw_date: str
    """Fecha tal como aparece en el CSV. Ejemplo: '01/03/2024'."""

    raw_time: str
    """Hora tal como aparece en el CSV. Ejemplo: '14:30:00'."""

    product_name: str
    """Nombre del producto. El exportador no separa producto de máquina,
    así que coincide con `machine`."""

    cycle_type: CycleType
    """WASH / DRY / UNKNOWN según el nombre de la máquina."""

    amount: Decimal
    """Valor de la venta en reales."""

    payment_method: str
    """Forma de pago. Ejemplo: 'Dinheiro', 'Cartão', 'Pix'."""

    machine: str
    """Nombre de la máquina. Ejemplo: 'Lavadora 3', 'Secadora Turbo'."""

    day_of_week: int
    """Día de la semana del timestamp: 0 = domingo ... 6 = sábado."""

    def __post_init__(self) -> None:
        if not 0 <= self.day_of_week <= 6:
            raise ValueError(f"day_of_week fuera de rango: {self.day_of_week}")
