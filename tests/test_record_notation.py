"""
Tests for game records and vertex notation.
"""

import unittest

from duo_engine.exceptions import MoveParseError, NotationError, RecordError
from duo_engine.move import PASS, Move
from duo_engine.notation import format_cells, format_move, format_vertex, parse_cells, parse_vertex
from duo_engine.record import format_record, parse_record


class TestRecord(unittest.TestCase):
    """Test splitting and joining records."""

    def test_parse_compact_record(self):
        moves = parse_record("55a0----aaa0")
        self.assertEqual(moves, [Move.from_parts(4, 4, 20, 0), PASS, Move.from_parts(9, 9, 20, 0)])

    def test_separators_ignored(self):
        expected = parse_record("55a0aaa0")
        for text in ("55a0 aaa0", "55a0/aaa0", "55a0,aaa0", "55a0\naaa0\n", " 55a0\taaa0 "):
            with self.subTest(text=text):
                self.assertEqual(parse_record(text), expected)

    def test_empty_record(self):
        self.assertEqual(parse_record(""), [])
        self.assertEqual(format_record([]), "")

    def test_bad_length(self):
        with self.assertRaises(RecordError):
            parse_record("55a0aa")

    def test_bad_ply_reports_position(self):
        with self.assertRaises(RecordError) as ctx:
            parse_record("55a0zzz0")
        self.assertIn("ply 2", str(ctx.exception))
        self.assertIsInstance(ctx.exception, MoveParseError)

    def test_format_record(self):
        moves = [Move.from_parts(4, 4, 20, 0), PASS]
        self.assertEqual(format_record(moves), "55a0----")
        self.assertEqual(format_record(moves, " "), "55a0 ----")


class TestVertexNotation(unittest.TestCase):
    """Test vertex and cell-list notation."""

    def test_format_vertex(self):
        self.assertEqual(format_vertex(4, 4), "e10")
        self.assertEqual(format_vertex(9, 9), "j5")
        self.assertEqual(format_vertex(0, 0), "a14")
        self.assertEqual(format_vertex(13, 13), "n1")
        with self.assertRaises(ValueError):
            format_vertex(14, 0)

    def test_parse_vertex(self):
        self.assertEqual(parse_vertex("e10"), (4, 4))
        self.assertEqual(parse_vertex("J5"), (9, 9))
        self.assertEqual(parse_vertex(" n1 "), (13, 13))
        for text in ("", "e", "o5", "e0", "e15", "ex", "5e"):
            with self.subTest(text=text):
                with self.assertRaises(NotationError):
                    parse_vertex(text)

    def test_parse_cells(self):
        self.assertEqual(parse_cells("e10,f10"), [(4, 4), (5, 4)])
        with self.assertRaises(NotationError):
            parse_cells("e10,")
        with self.assertRaises(NotationError):
            parse_cells("e10,e10")

    def test_format_move(self):
        self.assertEqual(format_move(PASS), "pass")
        self.assertEqual(format_move(Move.parse("55a0")), "e10")
        self.assertEqual(sorted(format_move(Move.parse("55b0")).split(",")), ["e10", "f10"])
        self.assertEqual(format_cells([(4, 4), (9, 9)]), "e10,j5")


if __name__ == '__main__':
    unittest.main()
