"""Boolean conditions, some of which query the driver's sensors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .contexte import Contexte
from .expressions import Expression
from .types import Direction, OperateurBinaireBool, OperateurBool, TypeCapteur


class SensorDriver(Protocol):
    """What a condition needs from the driver: sensor readings."""

    def verifier_capteur(
        self, type_capteur: TypeCapteur, direction: Direction, tortue: int
    ) -> bool:
        """Tell whether *tortue* sees *type_capteur* in *direction*."""
        ...


class Condition:
    """Base condition; on its own it is always false."""

    def calculer(self, ctx: Contexte, driver: SensorDriver) -> bool:
        return False


@dataclass(frozen=True)
class ConditionNot(Condition):
    """Logical negation of another condition."""

    condition: Condition

    def calculer(self, ctx: Contexte, driver: SensorDriver) -> bool:
        return not self.condition.calculer(ctx, driver)


@dataclass(frozen=True)
class ConditionBinaire(Condition):
    """Short-circuit ``et`` / ``ou`` of two conditions."""

    gauche: Condition
    droite: Condition
    op: OperateurBinaireBool

    def calculer(self, ctx: Contexte, driver: SensorDriver) -> bool:
        g = self.gauche.calculer(ctx, driver)
        if self.op is OperateurBinaireBool.ou:
            return g or self.droite.calculer(ctx, driver)
        if self.op is OperateurBinaireBool.et:
            return g and self.droite.calculer(ctx, driver)
        return False


@dataclass(frozen=True)
class TestBinaire(Condition):
    """Numeric comparison of two expressions."""

    __test__ = False

    gauche: Expression
    droite: Expression
    op: OperateurBool

    def calculer(self, ctx: Contexte, driver: SensorDriver) -> bool:
        g = self.gauche.calculer(ctx)
        d = self.droite.calculer(ctx)
        match self.op:
            case OperateurBool.egal:
                return g == d
            case OperateurBool.different:
                return g != d
            case OperateurBool.pluspetit:
                return g < d
            case OperateurBool.plusgrand:
                return g > d
        return False


@dataclass(frozen=True)
class ConditionCapteur(Condition):
    """Sensor query for the current turtle, or for *tortue* when given."""

    type: TypeCapteur
    direction: Direction
    tortue: Optional[Expression] = None

    def calculer(self, ctx: Contexte, driver: SensorDriver) -> bool:
        ident = ctx.tortue_courante
        if self.tortue is not None:
            ident = int(self.tortue.calculer(ctx))
        return driver.verifier_capteur(self.type, self.direction, ident)