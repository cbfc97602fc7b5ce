"""
Acumulador del nombre de la unidad.

El nombre de la unidad no se conoce antes de recorrer las filas: en el
layout ATTENDANT vive en la columna 0 de la primera fila válida. Este
objeto viaja por el loop de filas y guarda el primer nombre encontrado;
los siguientes se ignoran.
"""

from laundry_report.domain.models.dashboard_metadata import DEFAULT_UNIT_NAME


class UnitNameAccumulator:
    """Guarda el primer nombre de unidad no vacío que se le ofrece."""

    def __init__(self) -> None:
        self._value: str | None = None

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def offer(self, candidate: str | None) -> bool:
        """Propone un nombre. Solo se acepta si aún no hay uno.

        Returns:
            True si el candidato se aceptó.
        """
        if self._value is not None or not candidate:
            return False
        self._value = candidate
        return True

    @property
    def value(self) -> str:
        """Nombre encontrado, o el default si nunca se encontró."""
        return self._value if self._value is not None else DEFAULT_UNIT_NAME
