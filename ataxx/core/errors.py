"""Exceptions raised by the rules engine."""


class GameError(ValueError):
    """Base class for rule violations and malformed input."""


class IllegalMoveError(GameError):
    pass


class IllegalBlockError(GameError):
    pass


class MoveParseError(GameError):
    pass
