"""Executable instructions of a turtle program."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .conditions import Condition, SensorDriver
from .contexte import Contexte
from .expressions import Expression
from .types import TypeMouvement


class InterpreterDriver(SensorDriver, Protocol):
    """What instructions need from the driver that carries them out."""

    def bouger(self, type_mouvement: TypeMouvement, valeur: float) -> None:
        """Move the current turtle."""
        ...

    def changer_couleur(self, r: float, g: float, b: float) -> None:
        """Change the pen colour."""
        ...

    def appeler_fonction(
        self, nom: str, arguments: list[float], ctx: Contexte
    ) -> None:
        """Call the user function *nom* with evaluated *arguments*."""
        ...


class Instruction(ABC):
    """A statement of the language."""

    @abstractmethod
    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        """Run the instruction."""


@dataclass
class Bloc(Instruction):
    """A sequence of instructions run in order."""

    instructions: list[Instruction] = field(default_factory=list)

    def ajouter(self, instruction: Instruction) -> None:
        self.instructions.append(instruction)

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        for instruction in self.instructions:
            instruction.executer(ctx, driver)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)


@dataclass(frozen=True)
class CommandeMouvement(Instruction):
    """Move, turn or jump by the value of an expression."""

    valeur: Expression
    type: TypeMouvement

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        driver.bouger(self.type, self.valeur.calculer(ctx))


@dataclass(frozen=True)
class CommandeCouleur(Instruction):
    """Set the pen colour."""

    r: float
    g: float
    b: float

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        driver.changer_couleur(self.r, self.g, self.b)


@dataclass(frozen=True)
class CommandeSelectionTortue(Instruction):
    """Make the turtle designated by an expression the current one."""

    id: Expression

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        ctx.tortue_courante = int(self.id.calculer(ctx))


@dataclass(frozen=True)
class AppelFonction(Instruction):
    """Call of a user-defined function with argument expressions."""

    nom: str
    args: tuple[Expression, ...] = ()

    def __init__(self, nom: str, args: Iterable[Expression] = ()) -> None:
        object.__setattr__(self, "nom", nom)
        object.__setattr__(self, "args", tuple(args))

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        valeurs = [arg.calculer(ctx) for arg in self.args]
        driver.appeler_fonction(self.nom, valeurs, ctx)


@dataclass(frozen=True)
class ControleSi(Instruction):
    """``si`` with an optional ``sinon`` branch."""

    condition: Condition
    alors: Instruction
    sinon: Optional[Instruction] = None

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        if self.condition.calculer(ctx, driver):
            self.alors.executer(ctx, driver)
        elif self.sinon is not None:
            self.sinon.executer(ctx, driver)


@dataclass(frozen=True)
class ControleTantQue(Instruction):
    """``tant que`` loop."""

    condition: Condition
    bloc: Instruction

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        while self.condition.calculer(ctx, driver):
            self.bloc.executer(ctx, driver)


@dataclass(frozen=True)
class ControleRepete(Instruction):
    """``repete`` loop; the count is truncated toward zero."""

    nb: Expression
    bloc: Instruction

    def executer(self, ctx: Contexte, driver: InterpreterDriver) -> None:
        for _ in range(int(self.nb.calculer(ctx))):
            self.bloc.executer(ctx, driver)


__all__: Sequence[str] = (
    "InterpreterDriver",
    "Instruction",
    "Bloc",
    "CommandeMouvement",
    "CommandeCouleur",
    "CommandeSelectionTortue",
    "AppelFonction",
    "ControleSi",
    "ControleTantQue",
    "ControleRepete",
)