import pytest

from energon.cristal import Cristal, Rareza


def test_cristal_por_defecto_es_comun():
    cristal = Cristal()
    assert cristal.rareza is Rareza.COMUN
    assert cristal.es_de(Rareza.COMUN)
    assert not cristal.es_de(Rareza.RARO)


def test_estadisticas_de_cristal_comun():
    cristal = Cristal(Rareza.COMUN)
    assert cristal.fuerza == 10
    assert cristal.velocidad == 5
    assert cristal.defensa == 10


@pytest.mark.parametrize("rareza", list(Rareza))
def test_proporcion_de_estadisticas(rareza):
    cristal = Cristal(rareza)
    assert cristal.fuerza == cristal.defensa
    assert cristal.fuerza == 2 * cristal.velocidad


@pytest.mark.parametrize("rareza", list(Rareza))
def test_estadisticas_proporcionales_a_la_rareza(rareza):
    base = Cristal(Rareza.COMUN)
    cristal = Cristal(rareza)
    factor = rareza + 1
    assert cristal.fuerza == base.fuerza * factor
    assert cristal.velocidad == base.velocidad * factor
    assert cristal.defensa == base.defensa * factor


@pytest.mark.parametrize(
    "rareza, nombre",
    [
        (Rareza.COMUN, "COMUN"),
        (Rareza.RARO, "RARO"),
        (Rareza.EPICO, "EPICO"),
        (Rareza.LEGENDARIO, "LEGENDARIO"),
    ],
)
def test_rareza_a_string(rareza, nombre):
    assert Cristal(rareza).rareza_a_string() == nombre


def test_estadisticas_modificables():
    cristal = Cristal(Rareza.RARO)
    cristal.fuerza = 45
    assert cristal.fuerza == 45
    assert cristal.es_de(Rareza.RARO)


def test_rareza_desde_entero():
    assert Cristal(2).rareza is Rareza.EPICO


def test_rareza_invalida():
    with pytest.raises(ValueError):
        Cristal(7)