"""Console menus and line-oriented input for the game."""

import re
import sys
from typing import Optional, TextIO

from energon.texto import (
    COLOR_POR_DEFECTO,
    LETRA_EN_NEGRITA,
    RESALTADO_AZUL,
    RESALTADO_GRIS,
    RESALTADO_ROJO,
    SUBRAYADO_AMARILLO,
)

_FONDO_BLANCO = "\x1b[47m"
_FONDO_AZUL = "\x1b[44m"
_SEPARADOR = "\t----------------------------------"
_PEDIR_OPCION = "Elija una opcion: "
_PEDIR_MENSAJE = "Ingrese el mensaje: "

_TITULO = (
    (RESALTADO_ROJO, "████████╗██████╗░░█████╗░███╗░░██╗░██████╗███████╗░█████╗░██████╗░███╗░░░███╗███████╗██████╗░░██████╗"),
    (RESALTADO_ROJO, "╚══██╔══╝██╔══██╗██╔══██╗████╗░██║██╔════╝██╔════╝██╔══██╗██╔══██╗████╗░████║██╔════╝██╔══██╗██╔════╝"),
    (_FONDO_BLANCO, "░░░██║░░░██████╔╝███████║██╔██╗██║╚█████╗░█████╗░░██║░░██║██████╔╝██╔████╔██║█████╗░░██████╔╝╚█████╗░"),
    (_FONDO_BLANCO, "░░░██║░░░██╔══██╗██╔══██║██║╚████║░╚═══██╗██╔══╝░░██║░░██║██╔══██╗██║╚██╔╝██║██╔══╝░░██╔══██╗░╚═══██╗"),
    (_FONDO_AZUL, "░░░██║░░░██║░░██║██║░░██║██║░╚███║██████╔╝██║░░░░░╚█████╔╝██║░░██║██║░╚═╝░██║███████╗██║░░██║██████╔╝"),
    (_FONDO_AZUL, "░░░╚═╝░░░╚═╝░░╚═╝╚═╝░░╚═╝╚═╝░░╚══╝╚═════╝░╚═╝░░░░░░╚════╝░╚═╝░░╚═╝╚═╝░░░░░╚═╝╚══════╝╚═╝░░╚═╝╚═════╝░"),
)

_PALABRA = re.compile(r"\S+")


class Menu:
    """Prints the game's menus and reads the player's answers.

    Input is read the way a console game reads it: options are single
    non-blank characters, words are runs of non-blank characters, and
    messages are whole lines.
    """

    def __init__(self, entrada: Optional[TextIO] = None, salida: Optional[TextIO] = None) -> None:
        self._entrada = entrada if entrada is not None else sys.stdin
        self._salida = salida if salida is not None else sys.stdout
        self._pendiente = ""

    def mostrar(self, texto: str) -> None:
        """Write the text to the output and flush it."""
        self._salida.write(texto)
        self._salida.flush()

    def _llenar(self) -> None:
        if not self._pendiente:
            linea = self._entrada.readline()
            if linea == "":
                raise EOFError("No hay mas entrada")
            self._pendiente = linea

    def _saltar_blancos(self) -> None:
        while True:
            self._llenar()
            self._pendiente = self._pendiente.lstrip()
            if self._pendiente:
                return

    def leer_opcion(self) -> str:
        """Read one non-blank character; a line break right after it is consumed."""
        self._saltar_blancos()
        opcion, self._pendiente = self._pendiente[0], self._pendiente[1:]
        if self._pendiente.startswith("\n"):
            self._pendiente = self._pendiente[1:]
        return opcion

    def leer_palabra(self) -> str:
        """Read the next run of non-blank characters."""
        self._saltar_blancos()
        coincidencia = _PALABRA.match(self._pendiente)
        palabra = coincidencia.group()
        self._pendiente = self._pendiente[coincidencia.end():]
        return palabra

    def pedir_mensaje(self) -> str:
        """Prompt for a message and return the rest of the current line."""
        self.mostrar(_PEDIR_MENSAJE)
        self._llenar()
        linea, _, self._pendiente = self._pendiente.partition("\n")
        return linea

    def imprimir_titulo(self) -> None:
        """Print the game's banner."""
        lineas = [f"{fondo}{arte}{COLOR_POR_DEFECTO}" for fondo, arte in _TITULO]
        self.mostrar("\n" + "\n".join(lineas) + "\n")

    def imprimir_menu_principal(self) -> None:
        """Print the main menu."""
        self.mostrar(
            f"{COLOR_POR_DEFECTO}\n\n"
            f"{SUBRAYADO_AMARILLO}\t============ MENU PRINCIPAL ============{COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}\tBienvenido! Con que desea interactuar?\n"
            f"{_SEPARADOR}\n"
            "\t(1) Boveda: Gestiona tu boveda y fusiona cristales\n"
            "\t(2) Robots: Conversa con Optimus Prime o Megatron\n"
            "\t(3) Salir\n"
            f"{_SEPARADOR}\n\n"
            f"{_PEDIR_OPCION}"
        )

    def imprimir_menu_boveda(self) -> None:
        """Print the vault menu."""
        self.mostrar(
            f"{COLOR_POR_DEFECTO}\n\n"
            f"{SUBRAYADO_AMARILLO}{LETRA_EN_NEGRITA}"
            f"\t============ Que desea hacer en la boveda? ============{COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}{_SEPARADOR}\n"
            "\t(1) Almacenar cristal\n"
            "\t(2) Mostrar cristales almacenados\n"
            "\t(3) Exportar cristales\n"
            "\t(4) Fusionar cristales\n"
            "\t(5) Volver al menu principal\n"
            f"{_SEPARADOR}\n\n"
            f"{_PEDIR_OPCION}"
        )

    def imprimir_menu_robots(self) -> None:
        """Print the menu for choosing a robot."""
        self.mostrar(
            f"{COLOR_POR_DEFECTO}\n\n"
            f"{SUBRAYADO_AMARILLO}{LETRA_EN_NEGRITA}"
            f"\t============ Con quien desea interactuar? ============{COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}{_SEPARADOR}{COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}{RESALTADO_AZUL}\t(1) Optimus Prime{COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}{RESALTADO_GRIS}\t(2) Megatron{COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}\t(3) Volver al menu principal\n"
            f"{_SEPARADOR}\n\n"
            "Elija un robot: "
        )

    def imprimir_menu_optimus(self) -> None:
        """Print Optimus Prime's menu."""
        self.mostrar(
            f"{COLOR_POR_DEFECTO}\n\n"
            f"{LETRA_EN_NEGRITA}{RESALTADO_AZUL}"
            f"\t===== Que desea que haga Optimus Prime? ====={COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}{_SEPARADOR}\n"
            "(1) Cambiar su estado de animo\n"
            "(2) Enviar mensajes\n"
            "(3) Sugerir fusion\n"
            "(4) Volver al menu de seleccion\n"
            f"{_SEPARADOR}\n\n"
            f"{_PEDIR_OPCION}"
        )

    def imprimir_menu_megatron(self) -> None:
        """Print Megatron's menu."""
        self.mostrar(
            f"{COLOR_POR_DEFECTO}\n\n"
            f"{LETRA_EN_NEGRITA}{RESALTADO_GRIS}"
            f"\t===== Que desea que haga Megatron? ====={COLOR_POR_DEFECTO}\n"
            f"{LETRA_EN_NEGRITA}{_SEPARADOR}\n"
            "(1) Cambiar intencion\n"
            "(2) Enviar mensajes\n"
            "(3) Sugerir fusion\n"
            "(4) Volver al menu de seleccion\n"
            f"{_SEPARADOR}\n\n"
            f"{_PEDIR_OPCION}"
        )