"""Player-facing operations on the crystal vault."""

import sys
from os import PathLike
from typing import Union

from energon.boveda import (
    ERROR_POSICION_INVALIDA,
    BovedaCristales,
    ExcepcionBovedaCristales,
)
from energon.cristal import Cristal, Rareza
from energon.fusionador import ExcepcionFusionadorEnergon, FusionadorEnergon
from energon.menu import Menu

RUTA_ARCHIVO = "cristales.csv"

PEDIDO_PRIMER_CRISTAL = "Selecciona la posicion del primer cristal: "
PEDIDO_SEGUNDO_CRISTAL = "Selecciona la posicion del segundo cristal: "


class GestorBoveda:
    """Runs the vault actions chosen from the menu and reports their outcome."""

    def __init__(self, menu: Menu, boveda: BovedaCristales) -> None:
        self._menu = menu
        self._boveda = boveda

    def _error(self, error: Exception) -> None:
        self._menu.mostrar(f"Error: {error}\n")

    def almacenar_cristal(self) -> None:
        """Store a new common crystal, reporting a full vault as an error."""
        self._menu.mostrar("Almacenando un nuevo cristal...\n")
        try:
            self._boveda.almacenar_cristal(Cristal(Rareza.COMUN))
        except ExcepcionBovedaCristales as error:
            self._error(error)
            return
        self._menu.mostrar("Cristal de rareza COMUN almacenado correctamente.\n")

    def mostrar_cristales(self) -> None:
        """Show the stored crystals, reporting an empty vault as an error."""
        self._menu.mostrar("Cristales almacenados: \n")
        try:
            self._menu.mostrar(self._boveda.mostrar_cristales())
        except ExcepcionBovedaCristales as error:
            self._error(error)

    def exportar_cristales(self, ruta: Union[str, PathLike] = RUTA_ARCHIVO) -> None:
        """Export the vault to a CSV file; failures are reported on standard error."""
        try:
            self._boveda.exportar_cristales(ruta)
        except ExcepcionBovedaCristales as error:
            print(f"Error al exportar los cristales: {error}", file=sys.stderr)
            return
        self._menu.mostrar(f"Cristales exportados exitosamente a: {ruta}\n")

    def _tomar_cristal(self, pedido: str) -> Cristal:
        self._menu.mostrar(pedido)
        texto = self._menu.leer_palabra()
        try:
            posicion = int(texto)
        except ValueError:
            raise ExcepcionBovedaCristales(ERROR_POSICION_INVALIDA) from None
        return self._boveda.obtener_cristal(posicion)

    def fusionar_cristales(self) -> None:
        """Fuse two crystals chosen by position and store the result.

        If a position is invalid or the fusion is refused, the crystals
        taken out are put back in the vault.
        """
        fusionador = FusionadorEnergon()
        self.mostrar_cristales()
        try:
            primero = self._tomar_cristal(PEDIDO_PRIMER_CRISTAL)
        except ExcepcionBovedaCristales as error:
            self._error(error)
            return
        self.mostrar_cristales()
        try:
            segundo = self._tomar_cristal(PEDIDO_SEGUNDO_CRISTAL)
        except ExcepcionBovedaCristales as error:
            self._error(error)
            self._boveda.almacenar_cristal(primero)
            return
        try:
            resultado = fusionador.fusionar(primero, segundo)
        except ExcepcionFusionadorEnergon as error:
            self._error(error)
            self._boveda.almacenar_cristal(primero)
            self._boveda.almacenar_cristal(segundo)
            return
        self._menu.mostrar(
            f"Resultado de la fusión: Cristal de rareza {resultado.rareza_a_string()}\n"
        )
        self._boveda.almacenar_cristal(resultado)