"""Optimus Prime: answers messages and suggests fusions according to his mood."""

import random
from enum import Enum
from typing import Optional, Union

from energon.menu import Menu
from energon.texto import (
    COLOR_POR_DEFECTO,
    RESALTADO_AZUL,
    RESALTADO_ROJO,
    a_minusculas,
)

RESPUESTA_SERENO_MEGATRON_DECEPTICONS = (
    "La paz siempre es nuestra prioridad, pero no dudaremos en defendernos."
)
RESPUESTA_SERENO_AUTOBOTS = "Los Autobots estan aqui para proteger a todos los seres vivos."
RESPUESTA_SERENO_CYBERTRON = "Cybertron es nuestro hogar, pero nuestra mision esta aqui."
RESPUESTA_SERENO_GENERICA = "En que puedo ayudarte, humano?"
SUGERENCIA_FUSION_SERENO = (
    "Te recomiendo fusionar cristales comunes para comenzar a mejorar tu arsenal."
)

RESPUESTA_DETERMINADO_MEGATRON_DECEPTICONS = "Megatron sera detenido. No hay alternativa."
RESPUESTA_DETERMINADO_AUTOBOTS = "Los Autobots son la luz en medio de la oscuridad."
RESPUESTA_DETERMINADO_CYBERTRON = "Cybertron sobrevivira, como lo hemos hecho antes."
RESPUESTA_DETERMINADO_GENERICA = "Nuestra lucha es por la libertad de todos los seres."
SUGERENCIA_FUSION_DETERMINADO = (
    "Te sugiero fusionar cristales raros para prepararte para la batalla."
)

RESPUESTA_ENFURECIDO_GENERICA_1 = "No tengo tiempo para estas trivialidades."
RESPUESTA_ENFURECIDO_GENERICA_2 = "La batalla es inminente. Preparate."
SUGERENCIA_FUSION_ENFURECIDO = (
    "Fusiona cristales de alto riesgo para obtener una ventaja decisiva."
)

SOLICITUD_ANIMO = "Ingrese el estado de animo (1: sereno / 2: determinado / 3: enfurecido): "
ERROR_ANIMO_INVALIDO = "Animo invalido. Estableciendo sereno por defecto."
ERROR_OPCION = "Error. Ingrese una opcion valida.\n"
AVISO_FIN_MENSAJES = "-1 para dejar de mandar mensajes"
FIN_MENSAJES = "-1"


class Animo(Enum):
    """Optimus Prime's possible moods."""

    SERENO = "sereno"
    DETERMINADO = "determinado"
    ENFURECIDO = "enfurecido"


_ANIMOS_POR_TECLA = {
    "1": Animo.SERENO,
    "2": Animo.DETERMINADO,
    "3": Animo.ENFURECIDO,
}

# For each mood with keyword answers: (keywords, answer) pairs in priority order, then the fallback.
_REGLAS = {
    Animo.SERENO: (
        (
            (("megatron", "decepticons"), RESPUESTA_SERENO_MEGATRON_DECEPTICONS),
            (("autobots",), RESPUESTA_SERENO_AUTOBOTS),
            (("cybertron",), RESPUESTA_SERENO_CYBERTRON),
        ),
        RESPUESTA_SERENO_GENERICA,
    ),
    Animo.DETERMINADO: (
        (
            (("megatron", "decepticons"), RESPUESTA_DETERMINADO_MEGATRON_DECEPTICONS),
            (("autobots",), RESPUESTA_DETERMINADO_AUTOBOTS),
            (("cybertron",), RESPUESTA_DETERMINADO_CYBERTRON),
        ),
        RESPUESTA_DETERMINADO_GENERICA,
    ),
}

_RESPUESTAS_ENFURECIDO = (RESPUESTA_ENFURECIDO_GENERICA_1, RESPUESTA_ENFURECIDO_GENERICA_2)

_SUGERENCIAS = {
    Animo.SERENO: SUGERENCIA_FUSION_SERENO,
    Animo.DETERMINADO: SUGERENCIA_FUSION_DETERMINADO,
    Animo.ENFURECIDO: SUGERENCIA_FUSION_ENFURECIDO,
}


class OptimusPrime:
    """The Autobot leader; starts in a serene mood."""

    def __init__(self, azar: Optional[random.Random] = None) -> None:
        self._azar = azar if azar is not None else random.Random()
        self.estado_animo = Animo.SERENO

    def responder(self, mensaje: str) -> str:
        """Return the answer to a message, matched case-insensitively by the current mood."""
        if self.estado_animo is Animo.ENFURECIDO:
            return self._azar.choice(_RESPUESTAS_ENFURECIDO)
        texto = a_minusculas(mensaje)
        reglas, generica = _REGLAS[self.estado_animo]
        for claves, respuesta in reglas:
            if any(clave in texto for clave in claves):
                return respuesta
        return generica

    def sugerir_fusion(self) -> str:
        """Return the fusion suggestion for the current mood."""
        return _SUGERENCIAS[self.estado_animo]

    def cambiar_animo(self, animo: Union[Animo, str]) -> bool:
        """Set the mood by name or value.

        An unknown name sets the serene mood and returns False.
        """
        try:
            self.estado_animo = Animo(animo)
        except ValueError:
            self.estado_animo = Animo.SERENO
            return False
        return True

    def char_a_string_animo(self, animo: str) -> str:
        """Map a menu key ('1', '2', '3') to a mood name; anything else gives 'sereno'."""
        return _ANIMOS_POR_TECLA.get(animo, Animo.SERENO).value

    def procesar(self, menu: Menu) -> None:
        """Run Optimus Prime's menu until the player chooses to go back."""
        while True:
            menu.imprimir_menu_optimus()
            opcion = menu.leer_opcion()
            if opcion == "1":
                self._elegir_animo(menu)
            elif opcion == "2":
                self._conversar(menu)
            elif opcion == "3":
                menu.mostrar(f"{RESALTADO_AZUL}{self.sugerir_fusion()}{COLOR_POR_DEFECTO}")
            elif opcion == "4":
                menu.mostrar("Volviendo al menu principal...\n")
                return
            else:
                menu.mostrar(ERROR_OPCION)

    def _elegir_animo(self, menu: Menu) -> None:
        menu.mostrar(f"{SOLICITUD_ANIMO}\n")
        tecla = menu.leer_palabra()[0]
        if tecla not in _ANIMOS_POR_TECLA:
            menu.mostrar(ERROR_ANIMO_INVALIDO)
        self.cambiar_animo(self.char_a_string_animo(tecla))

    def _conversar(self, menu: Menu) -> None:
        menu.mostrar(f"\n{RESALTADO_ROJO}{AVISO_FIN_MENSAJES}{COLOR_POR_DEFECTO}\n\n")
        while (mensaje := menu.pedir_mensaje()) != FIN_MENSAJES:
            menu.mostrar(f"{RESALTADO_AZUL}{self.responder(mensaje)}{COLOR_POR_DEFECTO}\n")