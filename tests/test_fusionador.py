import itertools

import pytest

from energon.cristal import Cristal, Rareza
from energon.fusionador import (
    MENSAJE_ERROR_FUSION_DISTINTAS,
    MENSAJE_ERROR_FUSION_LEGENDARIO,
    ExcepcionFusionadorEnergon,
    FusionadorEnergon,
)

LIMITE_SISTEMA_FALLA = 3


class GeneradorFijo:
    """Answers every chance with a fixed value and records the percentages asked."""

    def __init__(self, retorno):
        self.retorno = retorno
        self.llamadas = []

    def generar_chance_porcentual(self, porcentaje):
        self.llamadas.append(porcentaje)
        return self.retorno


@pytest.fixture
def fusionador():
    return FusionadorEnergon()


@pytest.mark.parametrize(
    "rareza, porcentaje, esperada",
    [
        (Rareza.COMUN, 50, Rareza.RARO),
        (Rareza.RARO, 30, Rareza.EPICO),
        (Rareza.EPICO, 10, Rareza.LEGENDARIO),
    ],
)
def test_fusion_exitosa(fusionador, rareza, porcentaje, esperada):
    generador = GeneradorFijo(True)
    cristal = fusionador.fusionar(Cristal(rareza), Cristal(rareza), generador)
    assert cristal.es_de(esperada)
    assert generador.llamadas == [porcentaje]


@pytest.mark.parametrize(
    "rareza, porcentaje, esperada",
    [
        (Rareza.COMUN, 50, Rareza.COMUN),
        (Rareza.RARO, 30, Rareza.COMUN),
        (Rareza.EPICO, 10, Rareza.RARO),
    ],
)
def test_fusion_fallida(fusionador, rareza, porcentaje, esperada):
    generador = GeneradorFijo(False)
    cristal = fusionador.fusionar(Cristal(rareza), Cristal(rareza), generador)
    assert cristal.es_de(esperada)
    assert generador.llamadas == [porcentaje]


@pytest.mark.parametrize(
    "rareza_1, rareza_2",
    [
        (a, b)
        for a, b in itertools.permutations(list(Rareza), 2)
    ],
)
def test_no_se_pueden_fusionar_rarezas_distintas(fusionador, rareza_1, rareza_2):
    with pytest.raises(ExcepcionFusionadorEnergon) as error:
        fusionador.fusionar(Cristal(rareza_1), Cristal(rareza_2), GeneradorFijo(True))
    assert str(error.value) == MENSAJE_ERROR_FUSION_DISTINTAS


def test_no_se_pueden_fusionar_legendarios(fusionador):
    with pytest.raises(ExcepcionFusionadorEnergon) as error:
        fusionador.fusionar(Cristal(Rareza.LEGENDARIO), Cristal(Rareza.LEGENDARIO))
    assert str(error.value) == MENSAJE_ERROR_FUSION_LEGENDARIO


def _fusionar_una_de_cada(fusionador, generador):
    return (
        fusionador.fusionar(Cristal(Rareza.COMUN), Cristal(Rareza.COMUN), generador),
        fusionador.fusionar(Cristal(Rareza.RARO), Cristal(Rareza.RARO), generador),
        fusionador.fusionar(Cristal(Rareza.EPICO), Cristal(Rareza.EPICO), generador),
    )


def test_sistema_de_falla_cristales_comunes(fusionador):
    generador = GeneradorFijo(False)
    for _ in range(LIMITE_SISTEMA_FALLA):
        fusionador.fusionar(Cristal(Rareza.COMUN), Cristal(Rareza.COMUN), generador)

    comun, raro, epico = _fusionar_una_de_cada(fusionador, generador)

    assert comun.es_de(Rareza.RARO)
    assert raro.es_de(Rareza.COMUN)
    assert epico.es_de(Rareza.RARO)
    assert generador.llamadas.count(50) == 3
    assert generador.llamadas.count(30) == 1
    assert generador.llamadas.count(10) == 1


def test_sistema_de_falla_cristales_raros(fusionador):
    generador = GeneradorFijo(False)
    for _ in range(LIMITE_SISTEMA_FALLA):
        fusionador.fusionar(Cristal(Rareza.RARO), Cristal(Rareza.RARO), generador)

    comun, raro, epico = _fusionar_una_de_cada(fusionador, generador)

    assert comun.es_de(Rareza.COMUN)
    assert raro.es_de(Rareza.EPICO)
    assert epico.es_de(Rareza.RARO)
    assert generador.llamadas.count(50) == 1
    assert generador.llamadas.count(30) == 3
    assert generador.llamadas.count(10) == 1


def test_sistema_de_falla_cristales_epicos(fusionador):
    generador = GeneradorFijo(False)
    for _ in range(LIMITE_SISTEMA_FALLA):
        fusionador.fusionar(Cristal(Rareza.EPICO), Cristal(Rareza.EPICO), generador)

    comun, raro, epico = _fusionar_una_de_cada(fusionador, generador)

    assert comun.es_de(Rareza.COMUN)
    assert raro.es_de(Rareza.COMUN)
    assert epico.es_de(Rareza.LEGENDARIO)
    assert generador.llamadas.count(50) == 1
    assert generador.llamadas.count(30) == 1
    assert generador.llamadas.count(10) == 3


def test_sistema_de_falla_se_reinicia_tras_exito_garantizado(fusionador):
    generador = GeneradorFijo(False)
    for _ in range(LIMITE_SISTEMA_FALLA):
        fusionador.fusionar(Cristal(Rareza.COMUN), Cristal(Rareza.COMUN), generador)
    garantizado = fusionador.fusionar(Cristal(Rareza.COMUN), Cristal(Rareza.COMUN), generador)
    siguiente = fusionador.fusionar(Cristal(Rareza.COMUN), Cristal(Rareza.COMUN), generador)
    assert garantizado.es_de(Rareza.RARO)
    assert siguiente.es_de(Rareza.COMUN)


def test_es_fusion_exitosa_consulta_al_generador(fusionador):
    generador = GeneradorFijo(True)
    assert fusionador.es_fusion_exitosa(Rareza.RARO, 30, generador) is True
    assert generador.llamadas == [30]


def test_fusion_exitosa_combina_estadisticas(fusionador):
    cristal = fusionador.fusionar(
        Cristal(Rareza.COMUN), Cristal(Rareza.COMUN), GeneradorFijo(True)
    )
    assert (cristal.fuerza, cristal.velocidad, cristal.defensa) == (30, 15, 30)


def test_fusion_fallida_da_estadisticas_base(fusionador):
    cristal = fusionador.fusionar(
        Cristal(Rareza.EPICO), Cristal(Rareza.EPICO), GeneradorFijo(False)
    )
    assert (cristal.fuerza, cristal.velocidad, cristal.defensa) == (20, 10, 20)


def test_fusion_sin_generador_usa_uno_aleatorio(fusionador):
    cristal = fusionador.fusionar(Cristal(Rareza.COMUN), Cristal(Rareza.COMUN))
    assert cristal.rareza in {Rareza.COMUN, Rareza.RARO}