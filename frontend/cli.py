# frontend/cli.py

import argparse

from backend.config import DEFAULT_CONFIG_PATH, DEFAULT_PROFILE, load_config
from backend.game import GameSession, Outcome
from backend.utils import parse_coordinate, render_board


def build_parser():
    parser = argparse.ArgumentParser(description="Text Based Sweeper")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="path to game config yaml")
    parser.add_argument("--profile", default=DEFAULT_PROFILE, help="profile name inside the config file")
    parser.add_argument("--rows", type=int, default=None, help="number of rows (overrides profile)")
    parser.add_argument("--cols", type=int, default=None, help="number of columns (overrides profile)")
    parser.add_argument("--mine-divisor", type=int, default=None, help="one mine per this many cells (overrides profile)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for mine placement")
    return parser


def play(session: GameSession, input_fn=None):
    """
    Run the command loop until the session is won, lost or aborted.
    EOF or Ctrl-C on input aborts.
    """
    if input_fn is None:
        input_fn = input

    print("Welcome to Text Based Sweeper (TBS)\n")

    while not session.quit:
        print(render_board(session.board))
        print()

        try:
            row = parse_coordinate(input_fn("row? "))
            col = parse_coordinate(input_fn("col? "))
        except (EOFError, KeyboardInterrupt):
            print()
            session.abort()
            break

        result = session.select(row, col)

        if result.outcome is Outcome.INVALID:
            print("Invalid selection. Choose again.\n")
            continue

        if result.outcome is Outcome.HIT_MINE:
            print("BOOM! Game Over!\n")
            print(render_board(session.board, xray=True))
            break

        if result.outcome is Outcome.ALREADY_REVEALED:
            print("Already cleared. Choose again.\n")
            continue

        if session.has_won():
            print("You win!!! Congrats!\n")
            print(render_board(session.board, xray=True))
            break

        print()

    return session


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(
        args.profile,
        config_path=args.config,
        rows=args.rows,
        cols=args.cols,
        mine_divisor=args.mine_divisor,
        seed=args.seed,
    )
    play(GameSession.from_config(config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
