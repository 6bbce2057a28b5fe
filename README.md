# tortuelang

`tortuelang` holds the building blocks of a small turtle language with
French keywords: numeric expressions, conditions, executable instructions,
the token set of the grammar, and an in-memory garden of cells and walls in
which turtles move and draw lines.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

* `tortuelang.types` – the enumerations `TypeMouvement` (`AVANCE`, `RECULE`,
  `TOURNE`, `SAUTE`), `TypeCapteur` (`MUR`, `VIDE`), `Direction` (`DEVANT`,
  `DERRIERE`, `GAUCHE`, `DROITE`), `OperateurBinaire` (`plus`, `moins`,
  `multiplie`, `divise`), `OperateurUnaire` (`neg`), `OperateurBool`
  (`egal`, `different`, `pluspetit`, `plusgrand`) and `OperateurBinaireBool`
  (`et`, `ou`).
* `tortuelang.contexte` – `Contexte`, the variable store plus
  `tortue_courante`, the index of the selected turtle (0 at first).
  `ctx.get(nom)` returns `0.0` for an unknown variable without creating it;
  `ctx[nom]` creates it with `0.0`; `ctx[nom] = v` stores `float(v)`.
* `tortuelang.expressions` – `Constante`, `Variable`, `ExpressionBinaire`
  (division by zero yields `0.0`), `ExpressionUnaire` and
  `ExpressionTernaire`. Each has `calculer(contexte)`. `ExpressionTernaire`
  cannot evaluate its condition: it emits a `RuntimeWarning` and returns
  `0.0`.
* `tortuelang.conditions` – `Condition` (always false on its own),
  `ConditionNot`, `ConditionBinaire` (short-circuit `et` / `ou`),
  `TestBinaire` (numeric comparison) and `ConditionCapteur`, which asks the
  driver's `verifier_capteur(type_capteur, direction, tortue)` about the
  current turtle or about the turtle given by an optional expression.
  `SensorDriver` is the protocol such a driver follows.
* `tortuelang.instructions` – `Bloc`, `CommandeMouvement`, `CommandeCouleur`,
  `CommandeSelectionTortue`, `AppelFonction`, `ControleSi`,
  `ControleTantQue` and `ControleRepete` (the count is truncated toward
  zero). Each has `executer(ctx, driver)`. The driver follows the
  `InterpreterDriver` protocol: `bouger`, `changer_couleur`,
  `appeler_fonction(nom, arguments, ctx)` and `verifier_capteur`.
* `tortuelang.tokens` – `TokenKind`, the terminal symbols of the grammar,
  and `Token`, a frozen token with a value and a 1-based line and column.
  `NUMBER` carries a float, `VAR_NAME` a non-empty name, `COLOR_HEX` an
  `(r, g, b)` triple of floats; other kinds carry `None`, and a wrong value
  raises `TypeError` or `ValueError`.
* `tortuelang.rendering` – `PointF` and the abstract `JardinRendering`
  interface of a garden.
* `tortuelang.jardin` – `Jardin`, a `JardinRendering` kept in memory. A new
  garden is 20 by 15 empty cells with one turtle at (0, 0) facing −90°, and
  a yellow pen. `construction(nom)` reads a garden file: width and height
  first, then one row per line where `M` or `*` is a wall and `T` places a
  turtle on an empty cell; if no turtle is found one is placed at (0, 0).
  Cells outside the grid count as walls. `change_position` records the move
  as a `Ligne` in `jardin.lines`-style list `jardin.lignes`, in the current
  pen colour. Invalid turtle indices are ignored (queries give `(0, 0)` and
  `0.0`).
* `tortuelang.tortue` – `Tortue`, a turtle sprite description with grid
  position, cell size (35 by 35), heading, pen state and body colours;
  `rect()` gives its pixel rectangle.

## Examples

Evaluating an expression:

```python
from tortuelang.contexte import Contexte
from tortuelang.expressions import Constante, ExpressionBinaire, Variable
from tortuelang.types import OperateurBinaire

ctx = Contexte()
ctx["x"] = 4
expr = ExpressionBinaire(Variable("x"), Constante(2), OperateurBinaire.multiplie)
print(expr.calculer(ctx))  # 8.0
```

Running a program tree with a driver of your own:

```python
from tortuelang.contexte import Contexte
from tortuelang.expressions import Constante
from tortuelang.instructions import Bloc, CommandeMouvement, ControleRepete
from tortuelang.types import TypeMouvement


class Recorder:
    def __init__(self):
        self.moves = []

    def bouger(self, type_mouvement, valeur):
        self.moves.append((type_mouvement, valeur))

    def changer_couleur(self, r, g, b):
        pass

    def appeler_fonction(self, nom, arguments, ctx):
        pass

    def verifier_capteur(self, type_capteur, direction, tortue):
        return False


carre = ControleRepete(
    Constante(4),
    Bloc([
        CommandeMouvement(Constante(3), TypeMouvement.AVANCE),
        CommandeMouvement(Constante(90), TypeMouvement.TOURNE),
    ]),
)
driver = Recorder()
Bloc([carre]).executer(Contexte(), driver)
print(len(driver.moves))  # 8
```

Using the garden:

```python
from tortuelang.jardin import Jardin

jardin = Jardin()
jardin.changer_couleur(255, 136, 0)
jardin.change_position(0, 3.0, 0.0)
print(jardin.position(0))      # PointF(x=3.0, y=0.0)
print(jardin.lignes[0].couleur)  # (255, 136, 0)
print(jardin.est_mur(-1, 0))   # True
```

## What it does not do

The package has no scanner that turns program text into tokens and no
parser that turns tokens into instruction trees: programs are built in
Python from the classes above. It ships no driver that connects
instructions to a `Jardin` (movement, turning and sensors are left to the
`InterpreterDriver` you supply), no command-line program, and no window:
`Jardin` only records the grid, the turtles and the drawn lines in memory.