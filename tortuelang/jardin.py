"""A garden held in memory: grid, turtles and the lines they draw."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Union

from .rendering import JardinRendering, PointF

TILE_SIZE = 40
TITRE_PAR_DEFAUT = "Tortue - Projet"
LARGEUR_PAR_DEFAUT = 20
HAUTEUR_PAR_DEFAUT = 15
ANGLE_PAR_DEFAUT = -90.0

Couleur = tuple[int, int, int]
ROUGE: Couleur = (255, 0, 0)
JAUNE: Couleur = (255, 255, 0)

_DIMENSIONS = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")


class TypeCase(Enum):
    """Content of a garden cell."""

    VIDE = auto()
    MUR = auto()


@dataclass
class TortueInfo:
    """State of one turtle, in cell coordinates."""

    x: float = 0.0
    y: float = 0.0
    angle: float = ANGLE_PAR_DEFAUT
    couleur: Couleur = ROUGE
    visible: bool = True


@dataclass(frozen=True)
class Ligne:
    """A line drawn on the garden with a pen colour."""

    x1: float
    y1: float
    x2: float
    y2: float
    couleur: Couleur


class Jardin(JardinRendering):
    """Garden keeping its grid, turtles and drawn lines in memory.

    A new garden is 20 by 15 empty cells with one turtle in the top-left
    cell facing up.
    """

    def __init__(self, titre: str = "") -> None:
        self.titre = titre or TITRE_PAR_DEFAUT
        self.couleur_crayon: Couleur = JAUNE
        self.largeur = LARGEUR_PAR_DEFAUT
        self.hauteur = HAUTEUR_PAR_DEFAUT
        self._grille = self._grille_vide(self.largeur, self.hauteur)
        self._tortues: list[TortueInfo] = [TortueInfo()]
        self.lignes: list[Ligne] = []

    @staticmethod
    def _grille_vide(largeur: int, hauteur: int) -> list[list[TypeCase]]:
        return [[TypeCase.VIDE] * largeur for _ in range(hauteur)]

    @property
    def taille(self) -> tuple[int, int]:
        """Size of the garden in pixels."""
        return (self.largeur * TILE_SIZE, self.hauteur * TILE_SIZE)

    @property
    def tortues(self) -> tuple[TortueInfo, ...]:
        return tuple(self._tortues)

    def case(self, x: int, y: int) -> TypeCase:
        """Content of cell (*x*, *y*); outside the grid counts as a wall."""
        return TypeCase.MUR if self.est_mur(x, y) else TypeCase.VIDE

    def construction(self, nom: Union[str, Path]) -> None:
        """Load a garden file.

        The file starts with the width and height, then one line per row:
        ``M`` or ``*`` is a wall, ``T`` an empty cell holding a turtle, any
        other character or a missing one an empty cell.
        """
        texte = Path(nom).read_text()
        entete = _DIMENSIONS.match(texte)
        if entete is None:
            raise ValueError(f"{nom}: missing garden dimensions")
        largeur, hauteur = int(entete.group(1)), int(entete.group(2))
        if largeur < 0 or hauteur < 0:
            raise ValueError(f"{nom}: negative garden dimensions")

        reste = texte[entete.end():]
        lignes = reste.split("\n")[1:]

        grille = self._grille_vide(largeur, hauteur)
        tortues: list[TortueInfo] = []
        for y in range(hauteur):
            ligne = lignes[y] if y < len(lignes) else ""
            for x, c in enumerate(ligne[:largeur]):
                if c in ("M", "*"):
                    grille[y][x] = TypeCase.MUR
                elif c == "T":
                    tortues.append(TortueInfo(x=float(x), y=float(y)))

        self.largeur, self.hauteur = largeur, hauteur
        self._grille = grille
        self._tortues = tortues or [TortueInfo()]
        self.lignes = []

    def nombre_tortues(self) -> int:
        return len(self._tortues)

    def nouvelle_tortue(self) -> None:
        self._tortues.append(TortueInfo())

    def _valide(self, tortue: int) -> bool:
        return 0 <= tortue < len(self._tortues)

    def position(self, tortue: int) -> PointF:
        if not self._valide(tortue):
            return PointF(0.0, 0.0)
        info = self._tortues[tortue]
        return PointF(info.x, info.y)

    def orientation(self, tortue: int) -> float:
        if not self._valide(tortue):
            return 0.0
        return self._tortues[tortue].angle

    def change_position(self, tortue: int, x: float, y: float) -> None:
        if not self._valide(tortue):
            return
        info = self._tortues[tortue]
        ancien_x, ancien_y = info.x, info.y
        info.x, info.y = x, y
        self.dessiner_ligne(ancien_x, ancien_y, x, y)

    def change_orientation(self, tortue: int, angle: float) -> None:
        if self._valide(tortue):
            self._tortues[tortue].angle = angle

    def change_couleur(self, tortue: int, r: int, g: int, b: int) -> None:
        if self._valide(tortue):
            self._tortues[tortue].couleur = (r, g, b)

    def dessiner_ligne(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.lignes.append(Ligne(x1, y1, x2, y2, self.couleur_crayon))

    def changer_couleur(self, r: int, g: int, b: int) -> None:
        self.couleur_crayon = (r, g, b)

    def est_mur(self, x: int, y: int) -> bool:
        if not (0 <= x < self.largeur and 0 <= y < self.hauteur):
            return True
        return self._grille[y][x] is TypeCase.MUR

    def est_vide(self, x: int, y: int) -> bool:
        return not self.est_mur(x, y)