# energon

A small interactive terminal game in Spanish. It has two parts.

- **Bóveda**: a vault that holds up to 20 energon crystals. Each crystal is
  COMUN, RARO, EPICO or LEGENDARIO, and its strength, speed and defence grow
  with its rarity. From the vault menu you can store a new common crystal,
  list the stored ones, export them to `cristales.csv` in the current
  directory, or fuse two crystals of the same rarity picked by position.
- **Robots**: talk with Optimus Prime or Megatron. Optimus has a mood
  (sereno, determinado, enfurecido) and Megatron has an intention
  (desprecio, manipulacion, amenaza). Their replies depend on that state and
  on keywords in your message, matched regardless of case; when Optimus is
  enfurecido or Megatron is in amenaza, they pick one of two replies at
  random. Each of them can also suggest which crystals to fuse.

## Fusion rules

Two crystals of the same rarity can be fused; legendary crystals cannot.

| Fused    | Chance | On success  | On failure |
|----------|--------|-------------|------------|
| COMUN    | 50 %   | RARO        | COMUN      |
| RARO     | 30 %   | EPICO       | COMUN      |
| EPICO    | 10 %   | LEGENDARIO  | RARO       |

A successful fusion's stats are the sum of both crystals' stats times 1.5,
rounded down; a failed fusion gives a fresh crystal with base stats. After
three failed fusions of a rarity, the next fusion of that rarity succeeds
without a draw and the count starts over. The count is kept per
`FusionadorEnergon`.

## Installation

```
pip install .
```

## Playing

```
energon
```

The vault starts with two common crystals, one rare, one epic and one
legendary. Pick options by their number. When you send messages to a robot,
type `-1` on its own line to stop. End of input or Ctrl-C ends the game.

## Using it as a library

```python
from energon.cristal import Cristal, Rareza
from energon.boveda import BovedaCristales
from energon.fusionador import FusionadorEnergon
from energon.generador import GeneradorAleatorio

boveda = BovedaCristales()
boveda.almacenar_cristal(Cristal(Rareza.COMUN))
boveda.almacenar_cristal(Cristal(Rareza.COMUN))

fusionador = FusionadorEnergon()
resultado = fusionador.fusionar(
    boveda.obtener_cristal(0),
    boveda.obtener_cristal(0),
    GeneradorAleatorio(semilla=42),
)
print(resultado.rareza_a_string(), resultado.fuerza)

boveda.almacenar_cristal(resultado)
boveda.exportar_cristales("cristales.csv")
```

The modules:

- `energon.cristal`: `Rareza` and `Cristal` (fields `rareza`, `fuerza`,
  `velocidad`, `defensa`).
- `energon.boveda`: `BovedaCristales` with `almacenar_cristal`,
  `obtener_cristal` (removes and returns), `mostrar_cristales` (returns the
  coloured listing as a string) and `exportar_cristales(ruta)`, which writes a
  `;`-separated file with the header `Rareza;Fuerza;Velocidad;Defensa`.
- `energon.fusionador`: `FusionadorEnergon.fusionar(cristal_1, cristal_2,
  generador=None)`.
- `energon.generador`: `GeneradorAleatorio(semilla=None)` with
  `generar_chance_porcentual(porcentaje)`.
- `energon.optimus` and `energon.megatron`: `OptimusPrime` and `Megatron`,
  whose `responder(mensaje)` and `sugerir_fusion()` return text;
  `cambiar_animo` / `cambiar_intencion` take a name or an enum member and
  fall back to sereno / desprecio on an unknown name, returning `False`. Both
  accept a `random.Random` for their random replies.
- `energon.vector`: `Vector`, a sequence with `alta(dato, indice=None)` and
  `baja(indice=None)`.
- `energon.menu`, `energon.gestor` and `energon.cli`: the console menus, the
  vault actions and the game loop (`ejecutar(menu, boveda)`, `main()`).

Errors are raised as exceptions: `ExcepcionBovedaCristales` when the vault is
full or empty, a position is invalid or the export file cannot be opened;
`ExcepcionFusionadorEnergon` when the crystals differ in rarity or are
legendary; `ExcepcionPorcentajeNoValido` for a percentage outside [0, 100];
`ExcepcionVector` for an invalid vector position.

## What it does not do

The game keeps nothing between runs: the vault and the robots' states start
afresh each time. Crystals can be exported to a file but never loaded back
from one.

## Tests

```
pip install .[test]
pytest
```