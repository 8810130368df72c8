"""Terminal styles, menu option keys and text helpers shared by the game."""

import string

COLOR_POR_DEFECTO = "\x1b[0m"
SUBRAYADO_AMARILLO = "\x1b[4;43;1;37m"
LETRA_EN_NEGRITA = "\x1b[1;37m"
RESALTADO_AZUL = "\x1b[44;1;37m"
RESALTADO_GRIS = "\x1b[100;1;37m"
RESALTADO_AMARILLO = "\x1b[43;1;37m"
RESALTADO_VIOLETA = "\x1b[48;5;93;1;37m"
RESALTADO_ROJO = "\x1b[41m"

OPCION_OPTIMUS = "1"
OPCION_MEGATRON = "2"
OPCION_BOVEDA = "1"
OPCION_ROBOTS = "2"

ERROR_VALIDACION = "Error al ingresar el valor. Intente nuevamente.\n"

_A_MINUSCULAS = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def a_minusculas(mensaje: str) -> str:
    """Return the message with its ASCII letters in lower case."""
    return mensaje.translate(_A_MINUSCULAS)


def colorear(texto: str, estilo: str) -> str:
    """Wrap the text in a terminal style, resetting to the default colour after it."""
    return f"{estilo}{texto}{COLOR_POR_DEFECTO}"