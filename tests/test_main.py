"""
Unit tests for the command line entry point.
"""

import io
import unittest
from unittest.mock import patch

from generator import seed_sequence
from main import main, parse_arguments, run_text_mode
from session import GameSession


def scripted(commands):
    """read_line replacement that feeds commands and then signals end of input."""
    remaining = list(commands)

    def read_line(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return read_line


class TestParseArguments(unittest.TestCase):

    def test_defaults(self):
        args = parse_arguments([])
        self.assertEqual((args.rows, args.cols, args.labels), (3, 3, 9))
        self.assertIsNone(args.seed)
        self.assertFalse(args.text)

    def test_overrides(self):
        args = parse_arguments(['--rows', '4', '--cols', '5', '--labels', '6', '--seed', '11', '--text'])
        self.assertEqual((args.rows, args.cols, args.labels, args.seed), (4, 5, 6, 11))
        self.assertTrue(args.text)


class TestTextMode(unittest.TestCase):
    """Test cases for run_text_mode."""

    def run_commands(self, argv, commands):
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            session = run_text_mode(parse_arguments(argv), read_line=scripted(commands))
        return session, out.getvalue()

    def test_rotate_command(self):
        expected = GameSession()
        expected.new_game(3, 3, 9, seed=next(seed_sequence(3)))
        before = expected.tile_at(0, 0).rotation

        session, output = self.run_commands(['--seed', '3'], ['0 0', 'q'])
        self.assertEqual(session.tile_at(0, 0).rotation, (before + 1) % 4)
        self.assertIn("Matching edges:", output)

    def test_bad_commands_are_reported(self):
        session, output = self.run_commands(['--seed', '3'], ['9 9', 'abc', '1 2 3'])
        self.assertIn("ERRO:", output)
        self.assertIn("Comando inválido", output)
        self.assertEqual(session.rows, 3)

    def test_new_game_command(self):
        seeds = seed_sequence(4)
        next(seeds)
        expected = GameSession()
        expected.new_game(2, 2, 9, seed=next(seeds))

        session, _ = self.run_commands(['--seed', '4', '--rows', '2', '--cols', '2'], ['n', 'quit'])
        self.assertEqual(session.snapshot(), expected.snapshot())


class TestMain(unittest.TestCase):

    def test_invalid_dimensions(self):
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            self.assertEqual(main(['--rows', '0', '--text']), 2)
        self.assertIn("ERRO:", out.getvalue())

    def test_text_mode(self):
        with patch('main.run_text_mode') as run:
            self.assertEqual(main(['--text', '--seed', '1']), 0)
        run.assert_called_once()


if __name__ == '__main__':
    unittest.main()
