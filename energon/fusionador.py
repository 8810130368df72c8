"""Fusion of two crystals of the same rarity into a possibly better one."""

from typing import Optional

from energon.cristal import Cristal, Rareza
from energon.generador import GeneradorAleatorio

PORCENTAJE_COMUN = 50
PORCENTAJE_RARO = 30
PORCENTAJE_EPICO = 10
LIMITE_FALLOS = 3

MENSAJE_ERROR_FUSION_DISTINTAS = "Los cristales a fusionar deben ser de la misma rareza."
MENSAJE_ERROR_FUSION_LEGENDARIO = "No se pueden fusionar cristales legendarios."

# rarity fused -> (success chance, rarity on success, rarity on failure)
_REGLAS = {
    Rareza.COMUN: (PORCENTAJE_COMUN, Rareza.RARO, Rareza.COMUN),
    Rareza.RARO: (PORCENTAJE_RARO, Rareza.EPICO, Rareza.COMUN),
    Rareza.EPICO: (PORCENTAJE_EPICO, Rareza.LEGENDARIO, Rareza.RARO),
}


class ExcepcionFusionadorEnergon(RuntimeError):
    """Raised when two crystals cannot be fused."""


class FusionadorEnergon:
    """Fuses crystals, guaranteeing success after three failures in a row per rarity."""

    def __init__(self) -> None:
        self._fallos: dict[Rareza, int] = {rareza: 0 for rareza in _REGLAS}

    def fusionar(
        self,
        cristal_1: Cristal,
        cristal_2: Cristal,
        generador: Optional[GeneradorAleatorio] = None,
    ) -> Cristal:
        """Fuse two crystals of equal rarity and return the resulting crystal."""
        rareza = cristal_1.rareza
        if rareza != cristal_2.rareza:
            raise ExcepcionFusionadorEnergon(MENSAJE_ERROR_FUSION_DISTINTAS)
        if rareza == Rareza.LEGENDARIO:
            raise ExcepcionFusionadorEnergon(MENSAJE_ERROR_FUSION_LEGENDARIO)
        if rareza not in _REGLAS:
            raise ExcepcionFusionadorEnergon("Rareza desconocida")
        if generador is None:
            generador = GeneradorAleatorio()

        porcentaje, rareza_exito, rareza_fallo = _REGLAS[rareza]
        if self.es_fusion_exitosa(rareza, porcentaje, generador):
            return self._combinar(cristal_1, cristal_2, rareza_exito)
        self._fallos[rareza] += 1
        return Cristal(rareza_fallo)

    def es_fusion_exitosa(
        self, rareza: Rareza, porcentaje: int, generador: GeneradorAleatorio
    ) -> bool:
        """Decide whether a fusion of the given rarity succeeds.

        After three failures for that rarity the fusion succeeds without
        drawing and the failure count starts over.
        """
        if self._fallos.get(rareza, 0) == LIMITE_FALLOS:
            self._fallos[rareza] = 0
            return True
        return generador.generar_chance_porcentual(porcentaje)

    @staticmethod
    def _combinar(cristal_1: Cristal, cristal_2: Cristal, rareza: Rareza) -> Cristal:
        resultado = Cristal(rareza)
        resultado.fuerza = (cristal_1.fuerza + cristal_2.fuerza) * 15 // 10
        resultado.velocidad = (cristal_1.velocidad + cristal_2.velocidad) * 15 // 10
        resultado.defensa = (cristal_1.defensa + cristal_2.defensa) * 15 // 10
        return resultado