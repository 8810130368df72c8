"""Megatron: answers messages and suggests fusions according to his intention."""

import random
from enum import Enum
from typing import Optional, Union

from energon.menu import Menu
from energon.texto import (
    COLOR_POR_DEFECTO,
    RESALTADO_GRIS,
    RESALTADO_ROJO,
    a_minusculas,
)

RESPUESTA_DESPRECIO_OPTIMUS_PRIME_AUTOBOTS = "Esos debiles seran aplastados bajo mi yugo."
RESPUESTA_DESPRECIO_CYBERTRON = "Cybertron sera mio, a cualquier costo."
RESPUESTA_DESPRECIO_GENERICA = "Eres insignificante."
SUGERENCIA_FUSION_DESPRECIO = "Fusiona cristales comunes para mejorar tus capacidades basicas."

RESPUESTA_MANIPULACION_PODER_ALIADO = "Unete a mi, y juntos gobernaremos este universo."
RESPUESTA_MANIPULACION_FUERZA = "Solo el mas fuerte merece sobrevivir."
RESPUESTA_MANIPULACION_GENERICA = (
    "Puedo darte lo que buscas, si estas dispuesto a arrodillarte."
)
SUGERENCIA_FUSION_MANIPULACION = "Fusiona cristales raros para obtener un poder significativo."

RESPUESTA_AMENAZA_GENERICA_1 = "Atrevete a desafiarme, y conoceras el verdadero terror."
RESPUESTA_AMENAZA_GENERICA_2 = "No hay lugar para los debiles en mi imperio."
SUGERENCIA_FUSION_AMENAZA = "Realiza fusiones arriesgadas para obtener una ventaja poderosa."

SOLICITUD_INTENCION = (
    "Ingrese la intención (1: desprecio / 2: manipulacion / 3: amenaza): "
)
ERROR_INTENCION_INVALIDA = "Intencion invalida. Estableciendo desprecio por defecto."
ERROR_OPCION = "Error. Ingrese una opcion valida.\n"
AVISO_FIN_MENSAJES = "-1 para dejar de mandar mensajes"
FIN_MENSAJES = "-1"


class Intencion(Enum):
    """Megatron's possible intentions."""

    DESPRECIO = "desprecio"
    MANIPULACION = "manipulacion"
    AMENAZA = "amenaza"


_INTENCIONES_POR_TECLA = {
    "1": Intencion.DESPRECIO,
    "2": Intencion.MANIPULACION,
    "3": Intencion.AMENAZA,
}

# For each intention with keyword answers: (keywords, answer) pairs in priority order, then the fallback.
_REGLAS = {
    Intencion.DESPRECIO: (
        (
            (("optimus prime", "autobots"), RESPUESTA_DESPRECIO_OPTIMUS_PRIME_AUTOBOTS),
            (("cybertron",), RESPUESTA_DESPRECIO_CYBERTRON),
        ),
        RESPUESTA_DESPRECIO_GENERICA,
    ),
    Intencion.MANIPULACION: (
        (
            (("poder", "aliado"), RESPUESTA_MANIPULACION_PODER_ALIADO),
            (("fuerza",), RESPUESTA_MANIPULACION_FUERZA),
        ),
        RESPUESTA_MANIPULACION_GENERICA,
    ),
}

_RESPUESTAS_AMENAZA = (RESPUESTA_AMENAZA_GENERICA_1, RESPUESTA_AMENAZA_GENERICA_2)

_SUGERENCIAS = {
    Intencion.DESPRECIO: SUGERENCIA_FUSION_DESPRECIO,
    Intencion.MANIPULACION: SUGERENCIA_FUSION_MANIPULACION,
    Intencion.AMENAZA: SUGERENCIA_FUSION_AMENAZA,
}


class Megatron:
    """The Decepticon leader; starts with an intention of contempt."""

    def __init__(self, azar: Optional[random.Random] = None) -> None:
        self._azar = azar if azar is not None else random.Random()
        self.intencion = Intencion.DESPRECIO

    def responder(self, mensaje: str) -> str:
        """Return the answer to a message, matched case-insensitively by the current intention."""
        if self.intencion is Intencion.AMENAZA:
            return self._azar.choice(_RESPUESTAS_AMENAZA)
        texto = a_minusculas(mensaje)
        reglas, generica = _REGLAS[self.intencion]
        for claves, respuesta in reglas:
            if any(clave in texto for clave in claves):
                return respuesta
        return generica

    def sugerir_fusion(self) -> str:
        """Return the fusion suggestion for the current intention."""
        return _SUGERENCIAS[self.intencion]

    def cambiar_intencion(self, intencion: Union[Intencion, str]) -> bool:
        """Set the intention by name or value.

        An unknown name sets contempt and returns False.
        """
        try:
            self.intencion = Intencion(intencion)
        except ValueError:
            self.intencion = Intencion.DESPRECIO
            return False
        return True

    def char_a_string_intencion(self, intencion: str) -> str:
        """Map a menu key ('1', '2', '3') to an intention name; anything else gives 'desprecio'."""
        return _INTENCIONES_POR_TECLA.get(intencion, Intencion.DESPRECIO).value

    def procesar(self, menu: Menu) -> None:
        """Run Megatron's menu until the player chooses to go back."""
        while True:
            menu.imprimir_menu_megatron()
            opcion = menu.leer_opcion()
            if opcion == "1":
                self._elegir_intencion(menu)
            elif opcion == "2":
                self._conversar(menu)
            elif opcion == "3":
                menu.mostrar(f"{RESALTADO_GRIS}{self.sugerir_fusion()}{COLOR_POR_DEFECTO}")
            elif opcion == "4":
                menu.mostrar("Volviendo al menu principal...\n")
                return
            else:
                menu.mostrar(ERROR_OPCION)

    def _elegir_intencion(self, menu: Menu) -> None:
        menu.mostrar(f"{SOLICITUD_INTENCION}\n")
        tecla = menu.leer_palabra()[0]
        if tecla not in _INTENCIONES_POR_TECLA:
            menu.mostrar(f"\n{ERROR_INTENCION_INVALIDA}\n")
        self.cambiar_intencion(self.char_a_string_intencion(tecla))

    def _conversar(self, menu: Menu) -> None:
        menu.mostrar(f"\n{RESALTADO_ROJO}{AVISO_FIN_MENSAJES}{COLOR_POR_DEFECTO}\n\n")
        while (mensaje := menu.pedir_mensaje()) != FIN_MENSAJES:
            menu.mostrar(f"{RESALTADO_GRIS}{self.responder(mensaje)}{COLOR_POR_DEFECTO}\n")