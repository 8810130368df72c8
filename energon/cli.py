"""Command-line entry point: the interactive game loop."""

import argparse
from typing import Optional, Sequence

from energon.boveda import BovedaCristales
from energon.cristal import Cristal, Rareza
from energon.gestor import GestorBoveda
from energon.megatron import Megatron
from energon.menu import Menu
from energon.optimus import OptimusPrime
from energon.texto import (
    ERROR_VALIDACION,
    OPCION_BOVEDA,
    OPCION_MEGATRON,
    OPCION_OPTIMUS,
    OPCION_ROBOTS,
)

VOLVER = "Volviendo al menu principal...\n"
DESPEDIDA = "Gracias por jugar! Hasta la proxima\n"

_RAREZAS_INICIALES = (
    Rareza.COMUN,
    Rareza.COMUN,
    Rareza.RARO,
    Rareza.EPICO,
    Rareza.LEGENDARIO,
)


def crear_boveda_inicial() -> BovedaCristales:
    """Return a vault stocked with the crystals a new game starts with."""
    boveda = BovedaCristales()
    for rareza in _RAREZAS_INICIALES:
        boveda.almacenar_cristal(Cristal(rareza))
    return boveda


def _menu_boveda(menu: Menu, gestor: GestorBoveda) -> None:
    acciones = {
        "1": gestor.almacenar_cristal,
        "2": gestor.mostrar_cristales,
        "3": gestor.exportar_cristales,
        "4": gestor.fusionar_cristales,
    }
    while True:
        menu.imprimir_menu_boveda()
        opcion = menu.leer_opcion()
        if opcion == "5":
            menu.mostrar(VOLVER)
            return
        accion = acciones.get(opcion)
        if accion is None:
            menu.mostrar(ERROR_VALIDACION)
        else:
            accion()


def _menu_robots(menu: Menu, optimus: OptimusPrime, megatron: Megatron) -> None:
    while True:
        menu.imprimir_menu_robots()
        opcion = menu.leer_opcion()
        if opcion == OPCION_OPTIMUS:
            optimus.procesar(menu)
        elif opcion == OPCION_MEGATRON:
            megatron.procesar(menu)
        elif opcion == "3":
            menu.mostrar(VOLVER)
            return
        else:
            menu.mostrar(ERROR_VALIDACION)


def ejecutar(menu: Menu, boveda: BovedaCristales) -> None:
    """Run the main menu until the player chooses to leave."""
    optimus = OptimusPrime()
    megatron = Megatron()
    gestor = GestorBoveda(menu, boveda)
    menu.imprimir_titulo()
    while True:
        menu.imprimir_menu_principal()
        opcion = menu.leer_opcion()
        if opcion == OPCION_BOVEDA:
            _menu_boveda(menu, gestor)
        elif opcion == OPCION_ROBOTS:
            _menu_robots(menu, optimus, megatron)
        elif opcion == "3":
            menu.mostrar(DESPEDIDA)
            return
        else:
            menu.mostrar(ERROR_VALIDACION)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on the console; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="energon",
        description="Manage an energon crystal vault and talk to the robots.",
    )
    parser.parse_args(argv)
    menu = Menu()
    try:
        ejecutar(menu, crear_boveda_inicial())
    except (EOFError, KeyboardInterrupt):
        menu.mostrar("\n")
    return 0