"""
Tests para el ExcelWriter.

Se escribe el Excel real en tmp_path y se vuelve a leer con pandas
(openpyxl) para verificar hojas, columnas y valores.
"""

import pandas as pd
import pytest

from laundry_report.adapters.output.writers.excel_writer import ExcelWriter
from laundry_report.domain.exceptions import OutputError
from laundry_report.domain.models import DashboardMetadata, ParseResult


@pytest.fixture
def writer():
    return ExcelWriter()


class TestBuildFrames:
    def test_columnas_y_valores(self, report_parser, self_service_csv):
        resultado = report_parser.parse(self_service_csv)

        df_resumo, df_transacoes = ExcelWriter.build_frames([("vendas.csv", resultado)])

        assert list(df_transacoes.columns) == [
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
        primera = df_transacoes.iloc[0]
        assert primera["Unidade"] == "Lavanderia Centro"
        assert primera["Dia da Semana"] == "Sexta"
        assert primera["Tipo"] == "WASH"
        assert primera["Valor"] == pytest.approx(25.50)
        assert primera["Arquivo"] == "vendas.csv"

        fila = df_resumo.iloc[0]
        assert fila["Período"] == "01/03/2024 - 31/03/2024"
        assert fila["Tipo de Relatório"] == "SELF_SERVICE"
        assert fila["Transações"] == 2
        assert fila["Total"] == pytest.approx(43.50)
        assert fila["Lavagens"] == 1
        assert fila["Secagens"] == 1
        assert fila["Ticket Médio"] == pytest.approx(21.75)

    def test_totales_por_forma_de_pago_y_otros(self, report_parser, self_service_csv, attendant_csv):
        resultados = [
            ("ss.csv", report_parser.parse(self_service_csv)),
            ("at.csv", report_parser.parse(attendant_csv)),
        ]

        df_resumo, _ = ExcelWriter.build_frames(resultados)

        assert list(df_resumo.columns[-3:]) == [
            "Pagamento: Dinheiro",
            "Pagamento: Cartão",
            "Pagamento: Pix",
        ]
        ss, at = df_resumo.iloc[0], df_resumo.iloc[1]
        assert ss["Pagamento: Dinheiro"] == pytest.approx(25.50)
        assert ss["Pagamento: Cartão"] == pytest.approx(18.00)
        assert ss["Pagamento: Pix"] == 0.0
        assert at["Pagamento: Pix"] == pytest.approx(1200.50)
        assert at["Pagamento: Dinheiro"] == 0.0
        assert (ss["Outros"], ss["Total Outros"]) == (0, 0.0)

    def test_maquina_sin_tipo_cuenta_como_outros(self, report_parser):
        texto = "\n".join(
            [
                "Cod,Caixa,Terminal,Cliente,Pagamento,Qtd,Produtos,Unit,Desc,Total Venda,Data,Hora",
                '1,Cx1,T1,,"Pix",1,"Amaciante",,,"3,00","01/03/2024","10:00:00"',
            ]
        )

        df_resumo, _ = ExcelWriter.build_frames([("x.csv", report_parser.parse(texto))])

        assert df_resumo.iloc[0]["Outros"] == 1
        assert df_resumo.iloc[0]["Total Outros"] == pytest.approx(3.00)

    def test_resultado_vacio(self):
        df_resumo, df_transacoes = ExcelWriter.build_frames(
            [("vacio.csv", ParseResult(DashboardMetadata()))]
        )

        assert df_transacoes.empty
        assert len(df_transacoes.columns) == 10
        assert df_resumo.iloc[0]["Transações"] == 0
        assert not any(c.startswith("Pagamento: ") for c in df_resumo.columns)


class TestWriteSingle:
    def test_hojas(self, writer, report_parser, attendant_csv, tmp_path):
        resultado = report_parser.parse(attendant_csv)

        ruta = writer.write_single(resultado, tmp_path / "salida.xlsx", source_name="at.csv")

        hojas = pd.read_excel(ruta, sheet_name=None)
        assert list(hojas) == ["Resumo", "Transacoes"]
        transacoes = hojas["Transacoes"]
        assert len(transacoes) == 2
        assert list(transacoes["Data"]) == ["05/03/2024", "06/03/2024"]
        assert list(transacoes["Valor"]) == pytest.approx([12.00, 1200.50])
        assert hojas["Resumo"].iloc[0]["Unidade"] == "Cliente X"

    def test_agrega_extension(self, writer, tmp_path):
        ruta = writer.write_single(ParseResult(DashboardMetadata()), tmp_path / "salida")

        assert ruta.suffix == ".xlsx"
        assert ruta.exists()

    def test_crea_directorios(self, writer, tmp_path):
        ruta = writer.write_single(ParseResult(DashboardMetadata()), tmp_path / "a" / "b.xlsx")
        assert ruta.exists()

    def test_error_de_escritura(self, writer, tmp_path):
        bloqueo = tmp_path / "archivo"
        bloqueo.write_text("x")

        with pytest.raises(OutputError):
            writer.write_single(ParseResult(DashboardMetadata()), bloqueo / "salida.xlsx")


class TestWriteConsolidated:
    def test_varios_reportes(self, writer, report_parser, self_service_csv, attendant_csv, tmp_path):
        resultados = [
            ("ss.csv", report_parser.parse(self_service_csv)),
            ("at.csv", report_parser.parse(attendant_csv)),
        ]

        ruta = writer.write_consolidated(resultados, tmp_path / "consolidado.xlsx")

        hojas = pd.read_excel(ruta, sheet_name=None)
        assert len(hojas["Resumo"]) == 2
        assert hojas["Resumo"]["Pagamento: Pix"].tolist() == pytest.approx([0.0, 1200.50])
        assert len(hojas["Transacoes"]) == 4
        assert list(hojas["Resumo"]["Arquivo"]) == ["ss.csv", "at.csv"]

    def test_sin_resultados(self, writer, tmp_path):
        with pytest.raises(OutputError, match="consolidar"):
            writer.write_consolidated([], tmp_path / "consolidado.xlsx")
