# main.py
import argparse

from analysis import count_adjacencies, count_matching_edges
from constants import GRID_SIZE, LABEL_COUNT, STATUS_PLAYING, STATUS_SOLVED
from errors import InvalidConfiguration, OutOfBounds
from generator import seed_sequence, validate_dimensions
from session import GameSession
from utils import format_grid

TEXT_HELP = "Commands: '<row> <col>' rotates a tile, 'n' starts a new game, 'q' quits."


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Tetravex Puzzle Game (Rotation Mode)')
    parser.add_argument('--rows', type=int, default=GRID_SIZE,
                        help='Number of grid rows')
    parser.add_argument('--cols', type=int, default=GRID_SIZE,
                        help='Number of grid columns')
    parser.add_argument('--labels', type=int, default=LABEL_COUNT,
                        help='Number of distinct edge labels (1..N)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed; the same seed replays the same games')
    parser.add_argument('--text', action='store_true',
                        help='Play in the terminal instead of opening a window')
    return parser.parse_args(argv)


def print_board(session):
    print(format_grid(session.grid))
    matches = count_matching_edges(session.grid)
    total = count_adjacencies(session.rows, session.cols)
    print(f"Matching edges: {matches}/{total}")
    print(STATUS_SOLVED if session.is_solved() else STATUS_PLAYING)


def run_text_mode(args, read_line=input):
    """Terminal version of the game. Returns when the player quits or input ends."""
    seeds = seed_sequence(args.seed)
    session = GameSession()
    session.new_game(args.rows, args.cols, args.labels, seed=next(seeds))

    print(TEXT_HELP)
    print_board(session)
    while True:
        try:
            command = read_line("> ").strip().lower()
        except EOFError:
            break

        if command in ("q", "quit"):
            break
        if command in ("n", "new"):
            session.new_game(args.rows, args.cols, args.labels, seed=next(seeds))
            print_board(session)
            continue

        try:
            row, col = (int(part) for part in command.split())
            session.rotate(row, col)
        except ValueError:
            print(f"Comando inválido: '{command}'. {TEXT_HELP}")
            continue
        except OutOfBounds as e:
            print(f"ERRO: {e}")
            continue

        print_board(session)
    return session


def main(argv=None):
    args = parse_arguments(argv)
    try:
        validate_dimensions(args.rows, args.cols, args.labels)
    except InvalidConfiguration as e:
        print(f"ERRO: {e}")
        return 2

    if args.text:
        run_text_mode(args)
        return 0

    # Importado aqui para que o modo texto funcione sem pygame inicializado
    from board import InteractiveBoard
    InteractiveBoard(args.rows, args.cols, args.labels, args.seed).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
