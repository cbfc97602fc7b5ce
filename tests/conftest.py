"""
Fixtures compartidas.

MemoryLogger acumula los eventos en listas para poder hacer asserts
sobre el canal de diagnóstico sin imprimir nada.
"""

from pathlib import Path

import pytest

from laundry_report.domain.models.layout import Layout
from laundry_report.domain.ports.process_logger import ProcessLogger
from laundry_report.infrastructure.factory import create_default_parser


class MemoryLogger(ProcessLogger):
    def __init__(self) -> None:
        self.received: list[Path] = []
        self.skipped: list[tuple[Path, str]] = []
        self.layouts: list[Layout] = []
        self.header_warnings: list[Layout] = []
        self.completed: list[tuple[int, int]] = []
        self.errors: list[tuple[Path, Exception]] = []
        self.exports: list[Path] = []

    def log_file_received(self, file_path: Path) -> None:
        self.received.append(file_path)

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self.skipped.append((file_path, reason))

    def log_layout_detected(self, layout: Layout) -> None:
        self.layouts.append(layout)

    def log_header_not_found(self, layout: Layout) -> None:
        self.header_warnings.append(layout)

    def log_parse_complete(self, num_accepted: int, num_skipped: int) -> None:
        self.completed.append((num_accepted, num_skipped))

    def log_error(self, file_path: Path, error: Exception) -> None:
        self.errors.append((file_path, error))

    def log_export_complete(self, output_path: Path) -> None:
        self.exports.append(output_path)

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": len(self.received),
            "archivos_descartados": len(self.skipped),
            "reportes_procesados": len(self.completed),
            "archivos_con_error": len(self.errors),
            "total_transacciones": sum(a for a, _ in self.completed),
            "filas_descartadas": sum(s for _, s in self.completed),
            "errores": [{"archivo": p.name, "error": str(e)} for p, e in self.errors],
        }


# Reporte de autoservicio: banner, periodo, operador, fila de solo comas,
# encabezado, dos ventas y el pie de totales.
SELF_SERVICE_CSV = (
    "Relatório de Vendas - Autoatendimento,,,,,,,,,,,\n"
    '"Vendas de 01/03/2024 ate 31/03/2024",,,,,,,,,,,\n'
    'Operador:,"Lavanderia Centro",,,,,,,,,,\n'
    ",,,,,,,,,,,\n"
    "Cod,Caixa,Terminal,Cliente,Pagamento,Qtd,Produtos,Unit,Desc,Total Venda,Data,Hora\n"
    '1,Cx1,T1,,"Dinheiro",1,"Lavadora 3",,,"25,50","01/03/2024","14:30:00"\n'
    '2,Cx1,T1,,"Cartão",1,"Secadora 2",,,"R$ 18,00","02/03/2024","09:05:10"\n'
    'Total,,,,,,,,,"43,50",,\n'
)

# Reporte de atendente: el nombre de la unidad sale de la columna 0 y
# las filas de subtotal no traen fecha en la columna 12.
ATTENDANT_CSV = (
    "Relatório de Vendas por Atendente\r\n"
    "Vendas de 01/03/2024 ate 07/03/2024,,,,,,,,,,,,,\r\n"
    "\r\n"
    "Cliente,Cod,Atendente,Qtd,Nome Terminal,Pagamento,Desc,Acresc,"
    "Venda (R$),Obs1,Obs2,Obs3,Data,Hora\r\n"
    '"Cliente X",,,,"Secadora 1","Cartão",,,"12,00",,,,"05/03/2024","09:15:00"\r\n'
    '"Cliente X",,,,,,,,"12,00",,,,,\r\n'
    '"Cliente X",,,,"Lavadora 2","Pix",,,"1.200,50",,,,"06/03/2024","18:00:00"\r\n'
    "Total Geral,,,,,,,,\"1.212,50\",,,,,\r\n"
)


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def report_parser(memory_logger):
    return create_default_parser(logger=memory_logger)


@pytest.fixture
def self_service_csv() -> str:
    return SELF_SERVICE_CSV


@pytest.fixture
def attendant_csv() -> str:
    return ATTENDANT_CSV
