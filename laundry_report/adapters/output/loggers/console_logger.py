"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout,
con un formato consistente y un resumen final. Es el logger de la CLI.
"""

from pathlib import Path

from laundry_report.domain.models.layout import Layout
from laundry_report.domain.models.parse_result import ParseResult
from laundry_report.domain.models.report_summary import summarize
from laundry_report.domain.ports.process_logger import ProcessLogger
from laundry_report.domain.shared.money import format_brl


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Si False, solo se imprimen avisos, errores y el resumen.
        """
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._archivos_descartados: int = 0
        self._reportes_procesados: int = 0
        self._total_transacciones: int = 0
        self._filas_descartadas: int = 0
        self._errores: list[dict] = []

    def _info(self, mensaje: str) -> None:
        if self._verbose:
            print(mensaje)

    # --- Archivos ---

    def log_file_received(self, file_path: Path) -> None:
        self._archivos_recibidos += 1
        self._info(f"  📄 Recibido: {file_path.name}")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        self._info(f"  ⏭️  Descartado: {file_path.name} — {reason}")

    # --- Parseo ---

    def log_layout_detected(self, layout: Layout) -> None:
        if layout is Layout.UNKNOWN:
            print("  ❌ Layout NO identificado")
        else:
            self._info(f"  🧺 Layout identificado: {layout.value}")

    def log_header_not_found(self, layout: Layout) -> None:
        print(
            f"  ⚠️  Layout {layout.value} detectado pero sin fila de encabezado; "
            f"se parsea desde la primera línea"
        )

    def log_parse_complete(self, num_accepted: int, num_skipped: int) -> None:
        self._reportes_procesados += 1
        self._total_transacciones += num_accepted
        self._filas_descartadas += num_skipped
        self._info(
            f"  ✅ Completado: {num_accepted} transacciones, "
            f"{num_skipped} filas descartadas"
        )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name} — {error}")

    # --- Salida ---

    def log_export_complete(self, output_path: Path) -> None:
        self._info(f"  📁 Excel generado: {output_path}")

    # --- Resumen ---

    def print_report_summary(self, source_name: str, resultado: ParseResult) -> None:
        """Imprime los totales de un reporte (unidad, ciclos y formas de pago)."""
        meta = resultado.metadata
        resumen = summarize(resultado.transactions)

        self._info(f"  🧾 {source_name}: {meta.unit_name} ({meta.period})")
        self._info(
            f"     Total: {format_brl(resumen.total_amount)} en "
            f"{resumen.num_transactions} transacciones "
            f"(ticket médio {format_brl(resumen.average_ticket)})"
        )
        self._info(
            f"     Lavagens: {resumen.num_wash} = {format_brl(resumen.total_wash)} | "
            f"Secagens: {resumen.num_dry} = {format_brl(resumen.total_dry)} | "
            f"Outros: {resumen.num_unknown} = {format_brl(resumen.total_unknown)}"
        )
        for pagamento, total in resumen.totals_by_payment.items():
            self._info(f"     {pagamento or '(sem forma de pagamento)'}: {format_brl(total)}")

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_descartados": self._archivos_descartados,
            "reportes_procesados": self._reportes_procesados,
            "archivos_con_error": len(self._errores),
            "total_transacciones": self._total_transacciones,
            "filas_descartadas": self._filas_descartadas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:    {self._archivos_recibidos}")
        print(f"  Reportes procesados:   {self._reportes_procesados}")
        print(f"  Archivos descartados:  {self._archivos_descartados}")
        print(f"  Archivos con error:    {len(self._errores)}")
        print(f"  Total transacciones:   {self._total_transacciones}")
        print(f"  Filas descartadas:     {self._filas_descartadas}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
