"""Execution context: variables and the currently selected turtle."""

from __future__ import annotations


class Contexte:
    """Variable store plus the index of the current turtle.

    Reading an unknown variable with :meth:`get` yields ``0.0`` without
    creating it; indexing creates it with ``0.0``.
    """

    def __init__(self) -> None:
        self.tortue_courante: int = 0
        self._variables: dict[str, float] = {}

    def get(self, nom: str) -> float:
        """Return the value of *nom*, or ``0.0`` if it is not defined."""
        return self._variables.get(nom, 0.0)

    def __getitem__(self, nom: str) -> float:
        return self._variables.setdefault(nom, 0.0)

    def __setitem__(self, nom: str, valeur: float) -> None:
        self._variables[nom] = float(valeur)

    def __contains__(self, nom: object) -> bool:
        return nom in self._variables

    def __repr__(self) -> str:
        return (
            f"Contexte(tortue_courante={self.tortue_courante}, "
            f"variables={self._variables!r})"
        )