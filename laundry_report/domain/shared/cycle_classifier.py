"""
Clasificación del tipo de ciclo a partir del nombre de la máquina.

Las terminales no exportan el tipo de ciclo; solo el nombre libre de la
máquina o producto ("Lavadora 01", "Secadora Turbo", "LAVA-SECA 12kg").
El tipo se infiere por keywords.

Las reglas son una lista ordenada: se evalúan de arriba a abajo y gana
la primera coincidencia. "LAVA-SECA" es WASH porque "lava" va primero.
Para agregar un keyword basta con agregar una tupla.
"""

from laundry_report.domain.models.layout import CycleType

# (substring en minúsculas, tipo de ciclo)
CYCLE_RULES: list[tuple[str, CycleType]] = [
    ("lava", CycleType.WASH),
    ("seca", CycleType.DRY),
]


def classify_cycle(machine_name: str | None) -> CycleType:
    """Clasifica el nombre de la máquina en WASH / DRY / UNKNOWN.

    Ejemplos:
        >>> classify_cycle("Lavadora 01")
        <CycleType.WASH: 'WASH'>
        >>> classify_cycle("Secadora Turbo")
        <CycleType.DRY: 'DRY'>
        >>> classify_cycle("")
        <CycleType.UNKNOWN: 'UNKNOWN'>
    """
    if not machine_name:
        return CycleType.UNKNOWN

    lower = machine_name.lower()
    for keyword, cycle_type in CYCLE_RULES:
        if keyword in lower:
            return cycle_type
    return CycleType.UNKNOWN
