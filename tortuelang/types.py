"""Enumerations shared by the expression, condition and instruction trees."""

from enum import Enum, auto


class TypeMouvement(Enum):
    """Kind of turtle movement."""

    AVANCE = auto()
    RECULE = auto()
    TOURNE = auto()
    SAUTE = auto()


class TypeCapteur(Enum):
    """Kind of sensor a condition can query."""

    MUR = auto()
    VIDE = auto()


class Direction(Enum):
    """Direction relative to the turtle."""

    DEVANT = auto()
    DERRIERE = auto()
    GAUCHE = auto()
    DROITE = auto()


class OperateurBinaire(Enum):
    """Arithmetic binary operators."""

    plus = auto()
    moins = auto()
    multiplie = auto()
    divise = auto()


class OperateurUnaire(Enum):
    """Arithmetic unary operators."""

    neg = auto()


class OperateurBool(Enum):
    """Comparison operators between two numeric expressions."""

    egal = auto()
    different = auto()
    pluspetit = auto()
    plusgrand = auto()


class OperateurBinaireBool(Enum):
    """Logical operators between two conditions."""

    et = auto()
    ou = auto()