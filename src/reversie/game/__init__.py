"""Game management layer - controller, players, state machine.

Quick start::

    from reversie.core import Color
    from reversie.game import GameController, HumanPlayer, make_random_player

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=make_random_player(ctrl, Color.BLACK),
    )
    ctrl.submit_move(2, 4, Color.WHITE)
"""

from reversie.game.autoplay import make_random_player, play_out
from reversie.game.controller import GameController, GameEvents
from reversie.game.interfaces import (
    ChangeOrigin,
    GamePhase,
    IGameController,
    IllegalMove,
    IPlayer,
)
from reversie.game.persistence import discard_saved, load_board, save_board
from reversie.game.player import AIPlayer, HumanPlayer, RemotePlayer
from reversie.game.random_mover import (
    NoLegalMoveError,
    RandomMover,
    choose_random_legal_move,
)
from reversie.game.state import GameState, MoveRecord, TurnOutcome

__all__ = [
    # Interfaces
    "ChangeOrigin",
    "GamePhase",
    "IGameController",
    "IPlayer",
    "IllegalMove",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "RemotePlayer",
    "TurnOutcome",
    # Automated play
    "NoLegalMoveError",
    "RandomMover",
    "choose_random_legal_move",
    "make_random_player",
    "play_out",
    # Save files
    "discard_saved",
    "load_board",
    "save_board",
]
