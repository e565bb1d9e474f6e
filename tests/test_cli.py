import io
import os
import unittest
from unittest.mock import patch

from pearl_core.cli import main, run


class TestCli(unittest.TestCase):
    def _run(self, *args, **kwargs):
        with patch('sys.stdout', new_callable=io.StringIO) as out, \
                patch('sys.stderr', new_callable=io.StringIO) as err:
            status = run(*args, **kwargs)
        return status, out.getvalue(), err.getvalue()

    def test_given_blocks_op_when_running_then_prints_shifted_row(self):
        status, out, _ = self._run('.+-+#', op='blocks')
        self.assertEqual(status, 0)
        self.assertEqual(out, '...+#\n')

    def test_given_default_op_when_running_then_blocks_and_player_move(self):
        status, out, _ = self._run('.+-+#')
        self.assertEqual(status, 0)
        self.assertEqual(out, '...+#\nplayer: 2\n')
        status, out, _ = self._run('.+-+#', show_player=True)
        self.assertEqual(out, '..X+#\nplayer: 2\n')

    def test_given_no_blocks_when_shifting_then_player_only(self):
        status, out, _ = self._run('.o._')
        self.assertEqual(status, 0)
        self.assertEqual(out, '..._\nplayer: 2\n')

    def test_given_validate_op_when_running_then_both_checks_reported(self):
        status, out, _ = self._run('.+..#', op='validate')
        self.assertEqual(status, 0)
        self.assertIn('valid for moveBlocks: True', out)
        self.assertIn('valid for movePlayer: False', out)

    def test_given_unknown_symbol_when_running_then_error_status(self):
        status, out, err = self._run('.Z#')
        self.assertEqual(status, 2)
        self.assertEqual(out, '')
        self.assertIn('unrecognized symbol at index 1', err)

    def test_given_invalid_rows_when_running_then_error_status(self):
        status, _, err = self._run('+.#', op='blocks')
        self.assertEqual(status, 2)
        self.assertIn('moveBlocks', err)
        status, _, err = self._run('.+.#', op='player')
        self.assertEqual(status, 2)
        self.assertIn('movePlayer', err)

    def test_given_debug_when_running_then_trace_printed(self):
        status, out, _ = self._run('.o+#', op='blocks', debug=True)
        self.assertEqual(status, 0)
        self.assertIn('[pearls] input: .o+#', out)
        self.assertIn('[pearls] after moveBlocks: ..+#', out)
        self.assertTrue(out.endswith('..+#\n'))

    def test_given_argv_when_calling_main_then_exit_status_matches(self):
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            main(['.+-+#', '--op', 'blocks'])
        self.assertEqual(out.getvalue(), '...+#\n')
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                main(['+.#', '--op', 'blocks'])
        self.assertEqual(cm.exception.code, 2)

    def test_given_debug_env_when_calling_main_then_trace_printed(self):
        with patch.dict(os.environ, {'PEARLS_DEBUG': '1'}), \
                patch('sys.stdout', new_callable=io.StringIO) as out:
            main(['.+#', '--op', 'player'])
        self.assertIn('[pearls] after movePlayer: X+#', out.getvalue())
        self.assertTrue(out.getvalue().endswith('.+#\nplayer: 0\n'))


if __name__ == '__main__':
    unittest.main(verbosity=2)
