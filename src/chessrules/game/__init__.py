"""Game layer: the stateful owner of a live board.

Quick start::

    from chessrules.core import Move, Position
    from chessrules.game import GameState

    game = GameState()
    game.make_move(Move(Position.parse("e2"), Position.parse("e4")))
"""

from chessrules.game.state import GameState, MoveRecord

__all__ = [
    "GameState",
    "MoveRecord",
]
