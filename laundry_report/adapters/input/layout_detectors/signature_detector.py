"""
Adaptador de entrada: Detector de layout por firmas.

Una firma es un conjunto de textos que deben aparecer JUNTOS en una
misma línea. Las líneas de encabezado de cada layout son muy
predecibles, así que un simple substring matching basta, y tolera
la basura que el exportador deja alrededor (comillas, comas, banners).

La búsqueda es sobre el texto crudo de la línea (sin strip ni split) y
distingue mayúsculas: "Data" no es "DATA".
"""

from laundry_report.domain.models.layout import Layout
from laundry_report.domain.ports.layout_detector import LayoutDetector


class SignatureLayoutDetector(LayoutDetector):
    """Identifica el layout buscando firmas línea por línea.

    Las firmas están organizadas como una lista de tuplas
    (layout, [textos]). El orden importa: en cada línea se evalúan de
    arriba a abajo y gana la primera coincidencia. La primera línea que
    coincide con alguna firma decide el layout del archivo.
    """

    # Cada tupla: (layout, [textos que deben estar en la misma línea])
    _SIGNATURES: list[tuple[Layout, list[str]]] = [
        # --- Autoservicio: "Produtos,...,Total Venda,...,Data,Hora" ---
        (
            Layout.SELF_SERVICE,
            ["Produtos", "Total Venda", "Data"],
        ),
        # --- Atendente: "Cliente,...,Nome Terminal,...,Venda (R$),...,Data,Hora" ---
        (
            Layout.ATTENDANT,
            ["Nome Terminal", "Venda (R$)", "Data"],
        ),
    ]

    def __init__(self, signatures: list[tuple[Layout, list[str]]] | None = None) -> None:
        """
        Args:
            signatures: Firmas a usar en lugar de las de fábrica. Útil para
                        probar layouts nuevos sin tocar esta clase.
        """
        self._signatures = signatures if signatures is not None else self._SIGNATURES

    def detect(self, lines: list[str], max_lines: int) -> Layout:
        """Devuelve el layout de la primera línea que coincide con una firma.

        Solo se revisan las primeras `max_lines` líneas. Si ninguna
        coincide, devuelve Layout.UNKNOWN.
        """
        for line in lines[:max_lines]:
            for layout, tokens in self._signatures:
                if all(token in line for token in tokens):
                    return layout
        return Layout.UNKNOWN

    @property
    def supported_layouts(self) -> list[Layout]:
        """Layouts que este detector puede reconocer, en orden de prioridad."""
        return [layout for layout, _ in self._signatures]
