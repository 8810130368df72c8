"""A growable sequence with positional insertion and removal."""

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_FUERA_DE_RANGO = "Indice fuera de rango."
_VACIO = "El vector esta vacio."


class ExcepcionVector(RuntimeError):
    """Raised when a vector operation breaks its preconditions."""


class Vector(Generic[T]):
    """Ordered collection that raises ExcepcionVector on invalid positions."""

    def __init__(self, datos: Optional[Iterable[T]] = None) -> None:
        self._datos: list[T] = list(datos) if datos is not None else []

    def alta(self, dato: T, indice: Optional[int] = None) -> None:
        """Append the item, or insert it at the index moving later items right."""
        if indice is None:
            self._datos.append(dato)
            return
        if not 0 <= indice <= len(self._datos):
            raise ExcepcionVector(_FUERA_DE_RANGO)
        self._datos.insert(indice, dato)

    def baja(self, indice: Optional[int] = None) -> T:
        """Remove and return the last item, or the item at the index."""
        if indice is None:
            if not self._datos:
                raise ExcepcionVector(_VACIO)
            return self._datos.pop()
        if not 0 <= indice < len(self._datos):
            raise ExcepcionVector(_FUERA_DE_RANGO)
        return self._datos.pop(indice)

    def vacio(self) -> bool:
        """True when the vector holds no items."""
        return not self._datos

    def tamanio(self) -> int:
        """Number of items held."""
        return len(self._datos)

    def __len__(self) -> int:
        return len(self._datos)

    def _validar(self, indice: int) -> None:
        if not 0 <= indice < len(self._datos):
            raise ExcepcionVector("Indice fuera de rango")

    def __getitem__(self, indice: int) -> T:
        self._validar(indice)
        return self._datos[indice]

    def __setitem__(self, indice: int, dato: T) -> None:
        self._validar(indice)
        self._datos[indice] = dato

    def __iter__(self) -> Iterator[T]:
        return iter(self._datos)

    def __repr__(self) -> str:
        return f"Vector({self._datos!r})"