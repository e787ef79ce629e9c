"""Game management layer — move execution on top of the core board.

Quick start::

    from tilechess.game import GameController

    ctrl = GameController()
    ctrl.submit_move((6, 4), (4, 4))
"""

from tilechess.game.controller import GameController, GameEvents, MoveRecord

__all__ = [
    "GameController",
    "GameEvents",
    "MoveRecord",
]
