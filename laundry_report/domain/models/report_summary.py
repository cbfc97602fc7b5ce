"""
Modelo de dominio: Resumen de ventas de un reporte.

Alimenta la hoja "Resumo" del Excel y el resumen final de la CLI.
Se deriva siempre de las transacciones parseadas; nunca se lee del CSV.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from laundry_report.domain.models.layout import CycleType
from laundry_report.domain.models.transaction import Transaction


@dataclass(frozen=True)
class ReportSummary:
    """Totales de un reporte."""

    total_amount: Decimal
    num_transactions: int

    total_wash: Decimal
    num_wash: int

    total_dry: Decimal
    num_dry: int

    total_unknown: Decimal
    num_unknown: int

    totals_by_payment: dict[str, Decimal] = field(default_factory=dict)
    """Total por forma de pago, en orden de primera aparición."""

    @property
    def average_ticket(self) -> Decimal:
        """Ticket promedio. Decimal("0") si no hay transacciones."""
        if self.num_transactions == 0:
            return Decimal("0")
        return self.total_amount / self.num_transactions


def summarize(transactions: list[Transaction]) -> ReportSummary:
    """Calcula el resumen a partir de las transacciones."""
    totals: dict[CycleType, Decimal] = {t: Decimal("0") for t in CycleType}
    counts: dict[CycleType, int] = {t: 0 for t in CycleType}
    by_payment: dict[str, Decimal] = {}

    for tx in transactions:
        totals[tx.cycle_type] += tx.amount
        counts[tx.cycle_type] += 1
        by_payment[tx.payment_method] = (
            by_payment.get(tx.payment_method, Decimal("0")) + tx.amount
        )

    return ReportSummary(
        total_amount=sum(totals.values(), Decimal("0")),
        num_transactions=len(transactions),
        total_wash=totals[CycleType.WASH],
        num_wash=counts[CycleType.WASH],
        total_dry=totals[CycleType.DRY],
        num_dry=counts[CycleType.DRY],
        total_unknown=totals[CycleType.UNKNOWN],
        num_unknown=counts[CycleType.UNKNOWN],
        totals_by_payment=by_payment,
    )
