"""
Tests para los mappers posicionales (autoservicio y atendente).
"""

import pytest

from laundry_report.adapters.input.layout_mappers.attendant_mapper import AttendantMapper
from laundry_report.adapters.input.layout_mappers.self_service_mapper import SelfServiceMapper
from laundry_report.domain.models import Layout, RawRowFields, ScanLimits, SkipReason
from laundry_report.domain.shared.text_cleaner import split_csv_line


class TestSelfServiceMapper:
    @pytest.fixture
    def mapper(self):
        return SelfServiceMapper()

    def test_layout(self, mapper):
        assert mapper.layout is Layout.SELF_SERVICE

    def test_mapea_columnas(self, mapper):
        columns = split_csv_line(
            '1,Cx1,T1,,"Dinheiro",1," Lavadora 3 ",,,"25,50","01/03/2024","14:30:00"'
        )
        assert mapper.map_columns(columns) == RawRowFields(
            machine="Lavadora 3",
            amount="25,50",
            date="01/03/2024",
            time="14:30:00",
            payment="Dinheiro",
        )

    def test_defaults_de_monto_y_hora(self, mapper):
        columns = split_csv_line(',,,,"Pix",,"Secadora",,,,"01/03/2024",')
        fields = mapper.map_columns(columns)

        assert fields.amount == "0"
        assert fields.time == "00:00:00"

    def test_once_columnas_es_poco(self, mapper):
        assert mapper.map_columns([""] * 11) is SkipReason.TOO_FEW_COLUMNS

    def test_columnas_extra_se_ignoran(self, mapper):
        assert isinstance(mapper.map_columns([""] * 20), RawRowFields)

    def test_nombre_desde_operador(self, mapper):
        lines = ["banner", 'Operador:,"Lavanderia Centro",,', "Cod,Data,Hora"]
        assert mapper.find_unit_name([], lines, ScanLimits()) == "Lavanderia Centro"

    def test_operador_con_coma_en_el_nombre(self, mapper):
        lines = ['Operador:,"Lavanderia Centro, Loja 2",,']
        assert mapper.find_unit_name([], lines, ScanLimits()) == "Lavanderia Centro, Loja 2"

    def test_operador_debe_empezar_la_linea(self, mapper):
        lines = ['x,Operador:,"Lavanderia Centro"']
        assert mapper.find_unit_name([], lines, ScanLimits()) is None

    def test_ventana_de_operador(self, mapper):
        lines = ["a", "b", 'Operador:,"Lavanderia Centro"']
        assert mapper.find_unit_name([], lines, ScanLimits(operator_scan_lines=2)) is None
        assert mapper.find_unit_name([], lines, ScanLimits(operator_scan_lines=3)) == (
            "Lavanderia Centro"
        )


class TestAttendantMapper:
    @pytest.fixture
    def mapper(self):
        return AttendantMapper()

    def _row(self, date='"05/03/2024"', client='"Cliente X"'):
        return split_csv_line(
            f'{client},,,,"Secadora 1","Cartão",,,"12,00",,,,{date},"09:15:00"'
        )

    def test_layout(self, mapper):
        assert mapper.layout is Layout.ATTENDANT

    def test_mapea_columnas(self, mapper):
        assert mapper.map_columns(self._row()) == RawRowFields(
            machine="Secadora 1",
            amount="12,00",
            date="05/03/2024",
            time="09:15:00",
            payment="Cartão",
        )

    def test_sin_barra_en_fecha(self, mapper):
        assert mapper.map_columns(self._row(date="")) is SkipReason.MISSING_DATE_TOKEN

    def test_barra_sin_formato_pasa_el_filtro(self, mapper):
        """La validación del formato DD/MM/YYYY es posterior."""
        assert mapper.map_columns(self._row(date="5/3")).date == "5/3"

    def test_trece_columnas_es_poco(self, mapper):
        assert mapper.map_columns([""] * 13) is SkipReason.TOO_FEW_COLUMNS

    def test_nombre_desde_columna_cero(self, mapper):
        assert mapper.find_unit_name(self._row(), [], ScanLimits()) == "Cliente X"

    @pytest.mark.parametrize("rotulo", ["Cliente", "CLIENTE", '"cliente"', " Cliente "])
    def test_rotulo_cliente_se_rechaza(self, mapper, rotulo):
        assert mapper.find_unit_name(self._row(client=rotulo), [], ScanLimits()) is None

    def test_columna_cero_vacia(self, mapper):
        assert mapper.find_unit_name(self._row(client=""), [], ScanLimits()) is None
