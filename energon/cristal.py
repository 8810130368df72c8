"""Energon crystals and their rarity levels."""

from dataclasses import dataclass, field
from enum import IntEnum


class Rareza(IntEnum):
    """Crystal rarity, from lowest to highest."""

    COMUN = 0
    RARO = 1
    EPICO = 2
    LEGENDARIO = 3


@dataclass
class Cristal:
    """A crystal whose base stats grow with its rarity."""

    rareza: Rareza = Rareza.COMUN
    fuerza: int = field(init=False)
    velocidad: int = field(init=False)
    defensa: int = field(init=False)

    def __post_init__(self) -> None:
        self.rareza = Rareza(self.rareza)
        nivel = self.rareza + 1
        self.fuerza = nivel * 10
        self.velocidad = nivel * 5
        self.defensa = nivel * 10

    def es_de(self, rareza: Rareza) -> bool:
        """True when the crystal has the given rarity."""
        return self.rareza == rareza

    def rareza_a_string(self) -> str:
        """Upper-case name of the crystal's rarity."""
        return self.rareza.name