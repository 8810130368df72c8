import pytest

from energon.texto import (
    COLOR_POR_DEFECTO,
    RESALTADO_AZUL,
    RESALTADO_GRIS,
    a_minusculas,
    colorear,
)


@pytest.mark.parametrize(
    "mensaje, esperado",
    [
        ("OpTimUs PrimE", "optimus prime"),
        ("AuTobOtS", "autobots"),
        ("cYbeRTroN", "cybertron"),
        ("hola", "hola"),
    ],
)
def test_a_minusculas(mensaje, esperado):
    assert a_minusculas(mensaje) == esperado


def test_a_minusculas_solo_afecta_letras_ascii():
    assert a_minusculas("ÁRBOL") == "Árbol"


def test_a_minusculas_conserva_longitud_y_es_idempotente():
    mensaje = "Los Autobots Defenderemos Cybertron 123!"
    resultado = a_minusculas(mensaje)
    assert len(resultado) == len(mensaje)
    assert a_minusculas(resultado) == resultado


def test_a_minusculas_no_modifica_el_original():
    mensaje = "MEGATRON"
    resultado = a_minusculas(mensaje)
    assert resultado == "megatron"
    assert mensaje == "MEGATRON"


@pytest.mark.parametrize("estilo", [RESALTADO_AZUL, RESALTADO_GRIS])
def test_colorear_envuelve_el_texto(estilo):
    resultado = colorear("hola", estilo)
    assert resultado.startswith(estilo)
    assert resultado.endswith(COLOR_POR_DEFECTO)
    assert resultado[len(estilo):-len(COLOR_POR_DEFECTO)] == "hola"