"""
Tests de punta a punta de la CLI (laundry-report).
"""

import pandas as pd
import pytest

from laundry_report.cli.main import main


class TestMain:
    def test_un_archivo(self, tmp_path, self_service_csv, capsys):
        entrada = tmp_path / "vendas_marco.csv"
        entrada.write_text(self_service_csv, encoding="utf-8")
        salida = tmp_path / "out"

        main([str(entrada), "-o", str(salida)])

        excel = salida / "transacoes_vendas_marco.xlsx"
        assert excel.exists()
        assert len(pd.read_excel(excel, sheet_name="Transacoes")) == 2
        consola = capsys.readouterr().out
        assert "Total transacciones:   2" in consola
        assert "Total: R$ 43,50" in consola
        assert "Dinheiro: R$ 25,50" in consola

    def test_salida_por_defecto_junto_al_csv(self, tmp_path, attendant_csv):
        entrada = tmp_path / "atendente.csv"
        entrada.write_text(attendant_csv, encoding="utf-8")

        main([str(entrada), "--quiet"])

        assert (tmp_path / "transacoes_atendente.xlsx").exists()

    def test_directorio_genera_consolidado(
        self, tmp_path, self_service_csv, attendant_csv
    ):
        entrada = tmp_path / "csv"
        entrada.mkdir()
        (entrada / "a.csv").write_text(self_service_csv, encoding="utf-8")
        (entrada / "b.csv").write_text(attendant_csv, encoding="utf-8")
        salida = tmp_path / "out"

        main([str(entrada), "-o", str(salida), "-q"])

        assert (salida / "transacoes_a.xlsx").exists()
        assert (salida / "transacoes_b.xlsx").exists()
        consolidado = pd.read_excel(salida / "consolidado.xlsx", sheet_name="Resumo")
        assert len(consolidado) == 2

    def test_ruta_inexistente(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "nada.csv")])
        assert exc.value.code == 1

    def test_archivo_no_soportado(self, tmp_path):
        entrada = tmp_path / "vendas.xlsx"
        entrada.write_bytes(b"PK")

        with pytest.raises(SystemExit) as exc:
            main([str(entrada)])
        assert exc.value.code == 1

    def test_directorio_sin_csv(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path)])
        assert exc.value.code == 1

    def test_limite_invalido(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path), "--format-scan-lines", "0"])
        assert exc.value.code == 2

    def test_limite_de_operador(self, tmp_path, self_service_csv):
        entrada = tmp_path / "vendas.csv"
        entrada.write_text(self_service_csv, encoding="utf-8")

        main([str(entrada), "--operator-scan-lines", "1", "-q"])

        resumo = pd.read_excel(tmp_path / "transacoes_vendas.xlsx", sheet_name="Resumo")
        assert resumo.iloc[0]["Unidade"] == "Unidade Desconhecida"
