"""Application entry point.

Runs headless games between automated players, either both in this
process or one per process with boards synchronised over TCP::

    reversie local --seed 7
    reversie net --role listen --port 4000
    reversie net --role connect --address localhost --port 4000
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from reversie.core.enums import Color, GameResult
from reversie.game.autoplay import make_random_player, play_out
from reversie.game.controller import GameController
from reversie.game.persistence import DEFAULT_SAVE_NAME, discard_saved, load_board, save_board
from reversie.game.player import HumanPlayer
from reversie.game.random_mover import RandomMover
from reversie.net.config import (
    DEFAULT_ADDRESS,
    DEFAULT_PORT,
    NetworkSettings,
    PeerRole,
    PlayerKind,
)
from reversie.net.errors import PeerConnectionError

_LOGGER = logging.getLogger(__name__)

# Lets the final snapshot reach the peer before the channel is closed.
_QUIT_DELAY_MS = 300

_RESULT_TEXT = {
    GameResult.WHITE_WINS: "White wins",
    GameResult.BLACK_WINS: "Black wins",
    GameResult.DRAW: "It's a tie",
    GameResult.IN_PROGRESS: "Unfinished",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reversie", description="Headless Reversi games")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for moves")
    sub = parser.add_subparsers(dest="command", required=True)

    local = sub.add_parser("local", help="Play both sides in this process")
    local.add_argument(
        "--save-file",
        type=Path,
        default=None,
        help=f"Resume from / save to this file (e.g. {DEFAULT_SAVE_NAME})",
    )

    net = sub.add_parser("net", help="Play one side against a network peer")
    net.add_argument("--role", choices=["listen", "connect"], required=True)
    net.add_argument("--address", default=DEFAULT_ADDRESS, help="Peer host (connect role)")
    net.add_argument("--port", default=str(DEFAULT_PORT), help="TCP port")
    net.add_argument(
        "--player",
        default=PlayerKind.AUTOMATED.value,
        choices=[k.value for k in PlayerKind],
        help="Who plays the local side",
    )
    net.add_argument("--timeout", default=None, help="Connect/read timeout in seconds")
    return parser


def _report(controller: GameController) -> None:
    score = controller.score()
    print(f"{_RESULT_TEXT[controller.result]}. {score}")


def run_local_game(save_file: Path | None, seed: int | None) -> int:
    """Play random moves for both sides until the game ends."""
    controller = GameController()
    board = load_board(save_file) if save_file is not None else None
    if board is not None:
        _LOGGER.info("Resuming saved game from %s", save_file)
    controller.new_game(
        HumanPlayer(Color.WHITE, "White"),
        HumanPlayer(Color.BLACK, "Black"),
        board=board,
    )
    try:
        play_out(controller, RandomMover(seed))
    except KeyboardInterrupt:
        if save_file is not None:
            save_board(save_file, controller.board)
            _LOGGER.info("Game saved to %s", save_file)
        return 130

    if save_file is not None:
        discard_saved(save_file)
    print(repr(controller.board))
    _report(controller)
    return 0


def run_network_game(settings: NetworkSettings, seed: int | None, argv: list[str]) -> int:
    """Connect to the peer, then play the local side inside a Qt event loop."""
    from PyQt6.QtCore import QCoreApplication, QTimer

    from reversie.net.peer import SyncPeer
    from reversie.net.session import NetworkSession

    app = QCoreApplication.instance() or QCoreApplication(argv)

    host = settings.address if settings.role is PeerRole.CONNECT else ""
    try:
        peer = SyncPeer.connect(settings.role, host, settings.port, timeout=settings.timeout)
    except PeerConnectionError as exc:
        _LOGGER.error("%s", exc)
        return 2

    controller = GameController()
    session = NetworkSession(
        controller=controller, peer=peer, local_color=settings.local_color
    )
    local = make_random_player(
        controller,
        settings.local_color,
        RandomMover(seed),
        schedule=lambda fn: QTimer.singleShot(0, fn),
    )
    white, black = session.seat_players(local)

    controller.events.on_game_over.append(
        lambda _result: QTimer.singleShot(_QUIT_DELAY_MS, app.quit)
    )
    session.on_disconnected.append(lambda _msg: app.exit(1))

    # The game must exist before the receive loop delivers the first snapshot.
    controller.new_game(white, black)
    session.start()
    rc = app.exec()
    session.shutdown()

    print(repr(controller.board))
    _report(controller)
    return rc


def main(argv: list[str] | None = None) -> int:
    """Launch a headless Reversie game."""
    args_list = sys.argv[1:] if argv is None else argv
    parser = _build_parser()
    args = parser.parse_args(args_list)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "local":
        return run_local_game(args.save_file, args.seed)

    try:
        settings = NetworkSettings.parse(
            args.role, args.address, args.port, args.player, args.timeout
        )
    except ValueError as exc:
        parser.error(str(exc))
    if settings.player_kind is PlayerKind.HUMAN:
        parser.error("human play needs a graphical front end; use --player automated")
    return run_network_game(settings, args.seed, [sys.argv[0], *args_list])


if __name__ == "__main__":
    sys.exit(main())
