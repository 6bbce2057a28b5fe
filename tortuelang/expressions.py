"""Numeric expressions evaluated against a :class:`Contexte`."""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .contexte import Contexte
from .types import OperateurBinaire, OperateurUnaire

if TYPE_CHECKING:
    from .conditions import Condition


class Expression(ABC):
    """A numeric expression."""

    @abstractmethod
    def calculer(self, contexte: Contexte) -> float:
        """Evaluate the expression in *contexte*."""


@dataclass(frozen=True)
class Constante(Expression):
    """A literal number."""

    valeur: float

    def calculer(self, contexte: Contexte) -> float:
        return self.valeur


@dataclass(frozen=True)
class Variable(Expression):
    """A named variable; undefined variables evaluate to ``0.0``."""

    nom: str

    def calculer(self, contexte: Contexte) -> float:
        return contexte.get(self.nom)


@dataclass(frozen=True)
class ExpressionBinaire(Expression):
    """Arithmetic on two sub-expressions. Division by zero yields ``0.0``."""

    gauche: Expression
    droite: Expression
    op: OperateurBinaire

    def calculer(self, contexte: Contexte) -> float:
        g = self.gauche.calculer(contexte)
        d = self.droite.calculer(contexte)
        match self.op:
            case OperateurBinaire.plus:
                return g + d
            case OperateurBinaire.moins:
                return g - d
            case OperateurBinaire.multiplie:
                return g * d
            case OperateurBinaire.divise:
                return g / d if d != 0 else 0.0
        return 0.0


@dataclass(frozen=True)
class ExpressionUnaire(Expression):
    """Unary arithmetic on a sub-expression."""

    exp: Expression
    op: OperateurUnaire

    def calculer(self, contexte: Contexte) -> float:
        valeur = self.exp.calculer(contexte)
        if self.op is OperateurUnaire.neg:
            return -valeur
        return valeur


@dataclass(frozen=True)
class ExpressionTernaire(Expression):
    """Conditional expression; unsupported at evaluation time, yields ``0.0``.

    Evaluating a condition needs a driver, which an expression does not
    receive, so a warning is emitted and ``0.0`` returned.
    """

    condition: Condition
    exp1: Expression
    exp2: Expression

    def calculer(self, contexte: Contexte) -> float:
        warnings.warn(
            "ExpressionTernaire is not supported; evaluating to 0.0",
            RuntimeWarning,
            stacklevel=2,
        )
        return 0.0