"""A turtle sprite: grid position, heading, pen and body colours."""

from __future__ import annotations

from dataclasses import dataclass

Couleur = tuple[int, int, int]

COULEUR_CORPS: Couleur = (255, 200, 67)
COULEUR_CARAPACE: Couleur = (0, 255, 0)
COULEUR_MOTIF: Couleur = (0, 170, 0)


@dataclass
class Tortue:
    """A turtle on a grid of ``width`` by ``height`` pixel cells."""

    x: int = 0
    y: int = 0
    width: int = 35
    height: int = 35
    orientation: float = 0.0
    stylo: bool = False
    couleur_corps: Couleur = COULEUR_CORPS
    couleur_carapace: Couleur = COULEUR_CARAPACE
    couleur_motif: Couleur = COULEUR_MOTIF

    def rect(self) -> tuple[int, int, int, int]:
        """Pixel rectangle ``(left, top, width, height)`` of the turtle."""
        return (self.x * self.width, self.y * self.height, self.width, self.height)

    def poser_stylo(self) -> None:
        """Put the pen down."""
        self.stylo = True

    def lever_stylo(self) -> None:
        """Lift the pen."""
        self.stylo = False