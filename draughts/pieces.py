from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row delta a man of this color advances by."""
        return -1 if self is Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Color.WHITE else 7


class KingRule(str, Enum):
    """How far kings travel.

    ``FLYING`` kings slide over any number of empty squares and capture the
    single enemy piece on a diagonal, landing on any empty square past it.
    ``SHORT`` kings move like men in all four directions.
    """

    FLYING = "flying"
    SHORT = "short"


@dataclass(frozen=True, slots=True)
class Piece:
    color: Color
    is_king: bool = False

    def promote(self) -> "Piece":
        if self.is_king:
            return self
        return replace(self, is_king=True)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.color.name})"
