"""Random source for percentage-based chances."""

import random
import time
from typing import Optional


class ExcepcionPorcentajeNoValido(RuntimeError):
    """Raised when a percentage lies outside [0, 100]."""


class GeneradorAleatorio:
    """Draws uniform integers in [1, 100] to decide percentage chances."""

    def __init__(self, semilla: Optional[int] = None) -> None:
        if semilla is None:
            semilla = time.time_ns()
        self._azar = random.Random(semilla)

    def generar_chance_porcentual(self, porcentaje: int) -> bool:
        """Return True with the given probability in percent.

        0 always gives False and 100 always gives True.
        """
        if not 0 <= porcentaje <= 100:
            raise ExcepcionPorcentajeNoValido(
                f"El porcentaje ingresado ({porcentaje}) no es válido. "
                "Debe estar en el intervalo [0, 100]."
            )
        return self._azar.randint(1, 100) <= porcentaje