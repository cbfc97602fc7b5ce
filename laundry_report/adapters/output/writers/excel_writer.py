"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout estándar de 2 hojas:
- Hoja 1 (Resumo): Unidad, periodo, tipo de reporte, totales por tipo
  de ciclo y una columna "Pagamento: X" por cada forma de pago.
- Hoja 2 (Transacoes): Detalle de cada transacción con 10 columnas.

Los montos viajan como Decimal por todo el proyecto y solo se
convierten a float aquí, en la frontera con el Excel.
"""

from pathlib import Path

import pandas as pd

from laundry_report.domain.exceptions import OutputError
from laundry_report.domain.models.parse_result import ParseResult
from laundry_report.domain.models.report_summary import summarize
from laundry_report.domain.ports.output_writer import OutputWriter

_DIAS_SEMANA = ["Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado"]

_PREFIJO_PAGAMENTO = "Pagamento: "

_COLUNAS_RESUMO = [
    "Unidade",
    "Período",
    "Tipo de Relatório",
    "Transações",
    "Total",
    "Lavagens",
    "Total Lavagens",
    "Secagens",
    "Total Secagens",
    "Outros",
    "Total Outros",
    "Ticket Médio",
    "Arquivo",
]


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_single(
        self, resultado: ParseResult, output_path: Path, source_name: str = ""
    ) -> Path:
        """Escribe un solo reporte a Excel.

        Args:
            resultado: Resultado del parseo de un reporte.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.
            source_name: Nombre del CSV original (columna "Arquivo").

        Returns:
            Ruta del archivo creado.
        """
        return self._write([(source_name, resultado)], output_path)

    def write_consolidated(
        self, resultados: list[tuple[str, ParseResult]], output_path: Path
    ) -> Path:
        """Escribe todos los reportes en las mismas 2 hojas.

        Returns:
            Ruta del archivo creado.
        """
        if not resultados:
            raise OutputError(str(output_path), "No hay resultados para consolidar")
        return self._write(resultados, output_path)

    # =================================================================
    # MÉTODOS PRIVADOS: Generación del Excel
    # =================================================================

    def _write(self, resultados: list[tuple[str, ParseResult]], output_path: Path) -> Path:
        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    @staticmethod
    def build_frames(
        resultados: list[tuple[str, ParseResult]],
    ) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Construye los DataFrames (resumo, transacoes) sin tocar disco."""
        filas_transacoes = []
        filas_resumo = []
        # Formas de pago en orden de primera aparición entre todos los reportes
        pagamentos: list[str] = []

        for source_name, resultado in resultados:
            meta = resultado.metadata
            for tx in resultado.transactions:
                filas_transacoes.append(
                    {
                        "Unidade": meta.unit_name,
                        "Data": tx.raw_date,
                        "Hora": tx.raw_time,
                        "Dia da Semana": _DIAS_SEMANA[tx.day_of_week],
                        "Máquina": tx.machine,
                        "Tipo": tx.cycle_type.value,
                        "Valor": float(tx.amount),
                        "Pagamento": tx.payment_method,
                        "ID": tx.id,
                        "Arquivo": source_name,
                    }
                )

            resumen = summarize(resultado.transactions)
            filas_resumo.append(
                {
                    "Unidade": meta.unit_name,
                    "Período": meta.period,
                    "Tipo de Relatório": meta.report_type.value,
                    "Transações": resumen.num_transactions,
                    "Total": float(resumen.total_amount),
                    "Lavagens": resumen.num_wash,
                    "Total Lavagens": float(resumen.total_wash),
                    "Secagens": resumen.num_dry,
                    "Total Secagens": float(resumen.total_dry),
                    "Outros": resumen.num_unknown,
                    "Total Outros": float(resumen.total_unknown),
                    "Ticket Médio": float(resumen.average_ticket),
                    "Arquivo": source_name,
                    **{
                        f"{_PREFIJO_PAGAMENTO}{pagamento}": float(total)
                        for pagamento, total in resumen.totals_by_payment.items()
                    },
                }
            )
            for pagamento in resumen.totals_by_payment:
                if pagamento not in pagamentos:
                    pagamentos.append(pagamento)

        columnas_transacoes = [
            "Unidade",
            "Data",
            "Hora",
            "Dia da Semana",
            "Máquina",
            "Tipo",
            "Valor",
            "Pagamento",
            "ID",
            "Arquivo",
        ]
        df_transacoes = pd.DataFrame(filas_transacoes, columns=columnas_transacoes)
        columnas_pagamento = [f"{_PREFIJO_PAGAMENTO}{p}" for p in pagamentos]
        df_resumo = pd.DataFrame(filas_resumo, columns=_COLUNAS_RESUMO + columnas_pagamento)
        if columnas_pagamento:
            # Un reporte sin ventas en una forma de pago suma 0, no vacío
            df_resumo[columnas_pagamento] = df_resumo[columnas_pagamento].fillna(0.0)
        return df_resumo, df_transacoes

    def _escribir_excel(
        self, resultados: list[tuple[str, ParseResult]], output_path: Path
    ) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        df_resumo, df_transacoes = self.build_frames(resultados)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumo.to_excel(writer, index=False, sheet_name="Resumo")
            df_transacoes.to_excel(writer, index=False, sheet_name="Transacoes")

            # --- Aplicar formato ---
            workbook = writer.book
            ws_resumo = writer.sheets["Resumo"]
            ws_transacoes = writer.sheets["Transacoes"]

            money_format = workbook.add_format({"num_format": "#,##0.00"})
            # Fechas como texto: se conserva DD/MM/YYYY tal cual
            text_format = workbook.add_format({"num_format": "@"})

            # --- Formato Hoja Resumo ---
            ws_resumo.set_column("A:A", 28)  # Unidade
            ws_resumo.set_column("B:B", 26)  # Período
            ws_resumo.set_column("C:C", 16)  # Tipo de Relatório
            ws_resumo.set_column("D:D", 12)  # Transações
            ws_resumo.set_column("E:E", 14, money_format)  # Total
            ws_resumo.set_column("F:F", 10)  # Lavagens
            ws_resumo.set_column("G:G", 14, money_format)  # Total Lavagens
            ws_resumo.set_column("H:H", 10)  # Secagens
            ws_resumo.set_column("I:I", 14, money_format)  # Total Secagens
            ws_resumo.set_column("J:J", 10)  # Outros
            ws_resumo.set_column("K:L", 14, money_format)  # Total Outros / Ticket
            ws_resumo.set_column("M:M", 30)  # Arquivo
            # Una columna "Pagamento: X" por forma de pago, después de Arquivo
            n_fixas = len(_COLUNAS_RESUMO)
            if len(df_resumo.columns) > n_fixas:
                ws_resumo.set_column(n_fixas, len(df_resumo.columns) - 1, 18, money_format)

            # --- Formato Hoja Transacoes ---
            ws_transacoes.set_column("A:A", 28)  # Unidade
            ws_transacoes.set_column("B:C", 11, text_format)  # Data / Hora
            ws_transacoes.set_column("D:D", 14)  # Dia da Semana
            ws_transacoes.set_column("E:E", 24)  # Máquina
            ws_transacoes.set_column("F:F", 10)  # Tipo
            ws_transacoes.set_column("G:G", 12, money_format)  # Valor
            ws_transacoes.set_column("H:H", 16)  # Pagamento
            ws_transacoes.set_column("I:I", 40)  # ID
            ws_transacoes.set_column("J:J", 30)  # Arquivo
