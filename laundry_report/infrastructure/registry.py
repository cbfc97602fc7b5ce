"""
Registro de layout mappers disponibles.

Centraliza la relación Layout → mapper_instance.
Agregar un nuevo layout al sistema requiere 3 pasos:
1. Agregar el valor al enum Layout.
2. Crear la clase XxxMapper que implemente LayoutMapper y registrarla
   en create_default_registry().
3. Agregar su firma a SignatureLayoutDetector.

El ReportParser no sabe qué layouts existen: solo pide "dame el mapper
para ATTENDANT" y el registro se lo da. Layout.UNKNOWN nunca tiene
mapper, así que sus filas se descartan.
"""

from laundry_report.domain.models.layout import Layout
from laundry_report.domain.ports.layout_mapper import LayoutMapper


class LayoutMapperRegistry:
    """Registro de mappers por layout."""

    def __init__(self) -> None:
        self._mappers: dict[Layout, LayoutMapper] = {}

    def register(self, mapper: LayoutMapper) -> None:
        """Registra un mapper. La clave es mapper.layout.

        Raises:
            ValueError: Si ya existe un mapper para ese layout, o si se
                        intenta registrar uno para Layout.UNKNOWN.
        """
        layout = mapper.layout
        if layout is Layout.UNKNOWN:
            raise ValueError(
                f"No se puede registrar {type(mapper).__name__} para Layout.UNKNOWN"
            )
        if layout in self._mappers:
            raise ValueError(
                f"Ya existe un mapper registrado para '{layout.value}': "
                f"{type(self._mappers[layout]).__name__}. "
                f"No se puede registrar {type(mapper).__name__}."
            )
        self._mappers[layout] = mapper

    def get(self, layout: Layout) -> LayoutMapper | None:
        """Obtiene el mapper de un layout, o None si no hay."""
        return self._mappers.get(layout)

    @property
    def available_layouts(self) -> list[str]:
        """Lista de layouts con mapper disponible."""
        return sorted(layout.value for layout in self._mappers)

    def __len__(self) -> int:
        return len(self._mappers)


def create_default_registry() -> LayoutMapperRegistry:
    """Crea un registro con todos los mappers disponibles."""
    registry = LayoutMapperRegistry()

    # Se importan aquí para que el registro no dependa de los adaptadores
    # al importar el módulo.
    from laundry_report.adapters.input.layout_mappers.self_service_mapper import (
        SelfServiceMapper,
    )

    registry.register(SelfServiceMapper())

    from laundry_report.adapters.input.layout_mappers.attendant_mapper import (
        AttendantMapper,
    )

    registry.register(AttendantMapper())

    return registry
