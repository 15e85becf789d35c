"""Square contents for an Ataxx board."""

from enum import Enum

from .errors import GameError


class PieceColor(Enum):
    EMPTY = "-"
    BLOCKED = "X"
    RED = "r"
    BLUE = "b"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_piece(self) -> bool:
        """True for the two player colors."""
        return self is PieceColor.RED or self is PieceColor.BLUE

    def opposite(self) -> "PieceColor":
        """Return the other player's color; EMPTY and BLOCKED map to themselves."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @classmethod
    def parse(cls, name: str) -> "PieceColor":
        """Return RED or BLUE from a player name such as 'red' or 'Blue'."""
        name = name.strip().lower()
        if name == "red":
            return cls.RED
        if name == "blue":
            return cls.BLUE
        raise GameError(f"unknown player color: {name}")

    def __str__(self) -> str:
        return self.name.capitalize()
