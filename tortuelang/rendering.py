"""Interface the interpreter uses to drive a garden of turtles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PointF:
    """A position in garden cells; fractional values lie between cells."""

    x: float
    y: float


class JardinRendering(ABC):
    """A garden: a grid of walls and empty cells holding turtles."""

    @abstractmethod
    def construction(self, nom: str) -> None:
        """Load the garden described in the file *nom*."""

    @abstractmethod
    def nombre_tortues(self) -> int:
        """Number of turtles in the garden."""

    @abstractmethod
    def nouvelle_tortue(self) -> None:
        """Add a turtle at the default position."""

    @abstractmethod
    def position(self, tortue: int) -> PointF:
        """Position of turtle *tortue*."""

    @abstractmethod
    def orientation(self, tortue: int) -> float:
        """Heading of turtle *tortue*, in degrees."""

    @abstractmethod
    def change_position(self, tortue: int, x: float, y: float) -> None:
        """Move turtle *tortue* to (*x*, *y*)."""

    @abstractmethod
    def change_orientation(self, tortue: int, angle: float) -> None:
        """Set the heading of turtle *tortue*."""

    @abstractmethod
    def change_couleur(self, tortue: int, r: int, g: int, b: int) -> None:
        """Set the colour of turtle *tortue*."""

    @abstractmethod
    def dessiner_ligne(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a line between two positions with the current pen."""

    @abstractmethod
    def changer_couleur(self, r: int, g: int, b: int) -> None:
        """Set the pen colour."""

    @abstractmethod
    def est_mur(self, x: int, y: int) -> bool:
        """Tell whether cell (*x*, *y*) is a wall."""

    def est_vide(self, x: int, y: int) -> bool:
        """Tell whether cell (*x*, *y*) is free."""
        return not self.est_mur(x, y)