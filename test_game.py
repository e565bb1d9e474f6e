import unittest

from game import (
    CellState,
    create_from_string,
    to_string,
    is_valid_for_move_blocks,
    is_valid_for_move_player,
    move_blocks,
    move_player,
    shift_right,
)


class TestPearlsBasics(unittest.TestCase):
    def test_documented_merge_example(self):
        seq = create_from_string('.+-+#')
        move_blocks(seq)
        self.assertEqual(to_string(seq), '...+#')
        self.assertIs(seq[3], CellState.BLOCK_ODD)
        self.assertIs(seq[4], CellState.WALL)

    def test_player_stops_on_open_gate(self):
        seq = create_from_string('._#')
        self.assertEqual(move_player(seq), 1)
        self.assertIs(seq[1], CellState.OPEN_GATE)

    def test_pearl_before_block_collected(self):
        seq = [CellState.EMPTY, CellState.PEARL, CellState.BLOCK_ODD, CellState.WALL]
        self.assertTrue(is_valid_for_move_blocks(seq))
        move_blocks(seq)
        self.assertEqual(seq, [CellState.EMPTY, CellState.EMPTY, CellState.BLOCK_ODD, CellState.WALL])

    def test_move_blocks_output_is_ready_for_player(self):
        seq = create_from_string('.o-.+o.-.#')
        move_blocks(seq)
        self.assertTrue(is_valid_for_move_player(seq))

    def test_rejected_player_move_reports_zero(self):
        seq = create_from_string('.+..#')
        self.assertFalse(is_valid_for_move_player(seq))
        self.assertEqual(move_player(seq), 0)
        self.assertEqual(to_string(seq), '.+..#')

    def test_full_shift_collects_everything_reached(self):
        seq = create_from_string('.oo+o.#')
        self.assertEqual(shift_right(seq), 4)
        self.assertEqual(to_string(seq), '.....+#')


if __name__ == '__main__':
    unittest.main(verbosity=2)
