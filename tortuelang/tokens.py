"""Tokens of the turtle language, as produced by a scanner and read by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

TokenValue = Union[float, str, tuple[float, float, float], None]


class TokenKind(Enum):
    """Terminal symbols of the grammar, numbered as the parser tables number them."""

    EOF = 0
    ERROR = 1
    UNDEF = 2
    NL = 3
    END = 4
    END_OF_FILE = 5
    AVANCE = 6
    RECULE = 7
    TOURNE = 8
    SAUTE = 9
    COULEUR = 10
    TORTUES = 11
    JARDIN = 12
    FONCTION = 13
    SI = 14
    SINON = 15
    TANT = 16
    QUE = 17
    REPETE = 18
    MUR = 19
    VIDE = 20
    PAS = 21
    DEVANT = 22
    DERRIERE = 23
    GAUCHE = 24
    DROITE = 25
    DP = 26
    AROBASE = 27
    DOLLAR = 28
    PLUS = 29
    MOINS = 30
    MULT = 31
    DIV = 32
    LPAR = 33
    RPAR = 34
    EGAL = 35
    DIFFERENT = 36
    INF = 37
    SUP = 38
    ET = 39
    OU = 40
    NUMBER = 41
    VAR_NAME = 42
    COLOR_HEX = 43
    NEG = 44

    def __str__(self) -> str:
        return _DISPLAY_NAMES.get(self, self.name)


_DISPLAY_NAMES = {
    TokenKind.EOF: "end of file",
    TokenKind.ERROR: "error",
    TokenKind.UNDEF: "invalid token",
}


def _normalise(kind: TokenKind, value: TokenValue) -> TokenValue:
    if kind is TokenKind.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{kind.name} token needs a number, got {value!r}")
        return float(value)
    if kind is TokenKind.VAR_NAME:
        if not isinstance(value, str) or not value:
            raise TypeError(f"{kind.name} token needs a non-empty name, got {value!r}")
        return value
    if kind is TokenKind.COLOR_HEX:
        if value is None or isinstance(value, (str, bytes, int, float)):
            raise TypeError(f"{kind.name} token needs three components, got {value!r}")
        composantes = tuple(float(c) for c in value)  # type: ignore[union-attr]
        if len(composantes) != 3:
            raise ValueError(
                f"{kind.name} token needs three components, got {len(composantes)}"
            )
        return composantes  # type: ignore[return-value]
    if value is not None:
        raise ValueError(f"{kind.name} token carries no value, got {value!r}")
    return None


@dataclass(frozen=True)
class Token:
    """A token with its semantic value and its position in the source text.

    ``NUMBER`` carries a float, ``VAR_NAME`` a name and ``COLOR_HEX`` an
    ``(r, g, b)`` triple of floats; every other kind carries ``None``.
    """

    kind: TokenKind
    value: TokenValue = None
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.kind, TokenKind):
            raise TypeError(f"not a token kind: {self.kind!r}")
        if self.line < 1 or self.column < 1:
            raise ValueError("token positions start at 1")
        object.__setattr__(self, "value", _normalise(self.kind, self.value))

    def __str__(self) -> str:
        if self.value is None:
            return f"{self.kind} at {self.line}.{self.column}"
        return f"{self.kind}({self.value!r}) at {self.line}.{self.column}"