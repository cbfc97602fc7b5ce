"""
Tests para el SignatureLayoutDetector.
"""

import pytest

from laundry_report.adapters.input.layout_detectors.signature_detector import (
    SignatureLayoutDetector,
)
from laundry_report.domain.models import Layout

SS_HEADER = "Cod,Caixa,Terminal,Cliente,Pagamento,Qtd,Produtos,Unit,Desc,Total Venda,Data,Hora"
AT_HEADER = (
    "Cliente,Cod,Atendente,Qtd,Nome Terminal,Pagamento,Desc,Acresc,"
    "Venda (R$),Obs1,Obs2,Obs3,Data,Hora"
)


@pytest.fixture
def detector():
    return SignatureLayoutDetector()


class TestDetect:
    def test_autoservicio(self, detector):
        assert detector.detect(["banner", SS_HEADER], 5000) is Layout.SELF_SERVICE

    def test_atendente(self, detector):
        assert detector.detect(["banner", AT_HEADER], 5000) is Layout.ATTENDANT

    def test_tokens_repartidos_en_lineas_no_cuentan(self, detector):
        lines = ["Produtos", "Total Venda", "Data"]
        assert detector.detect(lines, 5000) is Layout.UNKNOWN

    def test_distingue_mayusculas(self, detector):
        assert detector.detect(["PRODUTOS,TOTAL VENDA,DATA"], 5000) is Layout.UNKNOWN

    def test_tolera_comillas(self, detector):
        line = '"Produtos","Total Venda","Data","Hora"'
        assert detector.detect([line], 5000) is Layout.SELF_SERVICE

    def test_primera_linea_que_coincide_decide(self, detector):
        assert detector.detect([AT_HEADER, SS_HEADER], 5000) is Layout.ATTENDANT

    def test_primera_firma_gana_en_la_misma_linea(self, detector):
        ambos = "Produtos,Total Venda,Nome Terminal,Venda (R$),Data"
        assert detector.detect([ambos], 5000) is Layout.SELF_SERVICE

    def test_respeta_max_lines(self, detector):
        lines = ["a", "b", SS_HEADER]
        assert detector.detect(lines, 2) is Layout.UNKNOWN
        assert detector.detect(lines, 3) is Layout.SELF_SERVICE

    def test_sin_lineas(self, detector):
        assert detector.detect([], 5000) is Layout.UNKNOWN


class TestCustomSignatures:
    def test_firmas_propias(self):
        detector = SignatureLayoutDetector([(Layout.ATTENDANT, ["Atendente"])])

        assert detector.detect(["x,Atendente,y"], 10) is Layout.ATTENDANT
        assert detector.supported_layouts == [Layout.ATTENDANT]

    def test_firmas_de_fabrica(self, detector):
        assert detector.supported_layouts == [Layout.SELF_SERVICE, Layout.ATTENDANT]
