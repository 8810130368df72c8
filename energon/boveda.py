"""Storage vault holding a limited number of crystals."""

import csv
from typing import Iterator

from energon.cristal import Cristal, Rareza
from energon.texto import (
    COLOR_POR_DEFECTO,
    LETRA_EN_NEGRITA,
    RESALTADO_AMARILLO,
    RESALTADO_AZUL,
    RESALTADO_GRIS,
    RESALTADO_VIOLETA,
)
from energon.vector import Vector

LIMITE_CRISTALES = 20

ERROR_BOVEDA_LLENA = "La boveda esta llena"
ERROR_BOVEDA_VACIA = "La boveda esta vacia"
ERROR_POSICION_INVALIDA = "Posicion invalida"
ERROR_ARCHIVO = "No se pudo abrir el archivo."

ENCABEZADO_CSV = ("Rareza", "Fuerza", "Velocidad", "Defensa")

_COLORES = {
    Rareza.COMUN: RESALTADO_GRIS,
    Rareza.RARO: RESALTADO_AZUL,
    Rareza.EPICO: RESALTADO_VIOLETA,
    Rareza.LEGENDARIO: RESALTADO_AMARILLO,
}


class ExcepcionBovedaCristales(RuntimeError):
    """Raised when a vault operation breaks its preconditions."""


class BovedaCristales:
    """Holds up to twenty crystals in insertion order."""

    def __init__(self) -> None:
        self._cristales: Vector[Cristal] = Vector()

    def almacenar_cristal(self, cristal_nuevo: Cristal) -> None:
        """Add a crystal at the end of the vault."""
        if len(self._cristales) == LIMITE_CRISTALES:
            raise ExcepcionBovedaCristales(ERROR_BOVEDA_LLENA)
        self._cristales.alta(cristal_nuevo)

    def mostrar_cristales(self) -> str:
        """Render the stored crystals as coloured terminal text."""
        if self._cristales.vacio():
            raise ExcepcionBovedaCristales(ERROR_BOVEDA_VACIA)
        bloques = []
        for posicion, cristal in enumerate(self._cristales):
            color = _COLORES.get(cristal.rareza, COLOR_POR_DEFECTO)
            bloques.append(
                f"\n{color}Cristal {posicion}: {cristal.rareza_a_string()}"
                f"{COLOR_POR_DEFECTO}\n"
                f"{LETRA_EN_NEGRITA}Fuerza: {cristal.fuerza} "
                f"Velocidad: {cristal.velocidad} "
                f"Defensa: {cristal.defensa}\n"
            )
        return "".join(bloques)

    def obtener_cristal(self, posicion: int) -> Cristal:
        """Remove the crystal at the position and return it."""
        if self._cristales.vacio():
            raise ExcepcionBovedaCristales(ERROR_BOVEDA_VACIA)
        if not 0 <= posicion < len(self._cristales):
            raise ExcepcionBovedaCristales(ERROR_POSICION_INVALIDA)
        return self._cristales.baja(posicion)

    def exportar_cristales(self, ruta) -> None:
        """Write the stored crystals to a semicolon-separated file."""
        try:
            archivo = open(ruta, "w", newline="", encoding="utf-8")
        except OSError as error:
            raise ExcepcionBovedaCristales(ERROR_ARCHIVO) from error
        with archivo:
            escritor = csv.writer(archivo, delimiter=";", lineterminator="\n")
            escritor.writerow(ENCABEZADO_CSV)
            escritor.writerows(
                (c.rareza_a_string(), c.fuerza, c.velocidad, c.defensa)
                for c in self._cristales
            )

    def __len__(self) -> int:
        return len(self._cristales)

    def __iter__(self) -> Iterator[Cristal]:
        return iter(self._cristales)