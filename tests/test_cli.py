import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from clue_core.cli import main

from sample_board import DATA_LAYOUT, DATA_LEGEND, write_config


class TestCli(unittest.TestCase):
    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(['--layout', DATA_LAYOUT, '--legend', DATA_LEGEND, *argv])
        return code, out.getvalue(), err.getvalue()

    def test_given_config_only_when_run_then_board_and_legend_printed(self):
        code, out, _ = self._run()
        self.assertEqual(code, 0)
        self.assertIn('Board 9x12', out)
        self.assertIn('K: Kitchen', out)

    def test_given_query_when_run_then_targets_listed(self):
        code, out, _ = self._run('--row', '0', '--col', '3', '--steps', '3', '--show-paths')
        self.assertEqual(code, 0)
        self.assertIn('2 targets from (0,3) with 3 steps:', out)
        self.assertIn('(2,2) (3,3)', out)
        self.assertIn('(0,3) -> (1,3) -> (2,3) -> (2,2)', out)

    def test_given_partial_query_when_run_then_usage_error(self):
        with redirect_stderr(io.StringIO()), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(['--layout', DATA_LAYOUT, '--legend', DATA_LEGEND, '--row', '1'])

    def test_given_out_of_range_query_when_run_then_exit_code_two(self):
        code, _, err = self._run('--row', '40', '--col', '0', '--steps', '2')
        self.assertEqual(code, 2)
        self.assertIn('error:', err)

    def test_given_bad_config_when_run_then_exit_code_one(self):
        with tempfile.TemporaryDirectory() as td:
            layout, legend = write_config(td, ["K,W", "W"], ["K, Kitchen, Card", "W, Walkway, Other"])
            out, err = io.StringIO(), io.StringIO()
            with redirect_stdout(out), redirect_stderr(err):
                code = main(['--layout', layout, '--legend', legend])
        self.assertEqual(code, 1)
        self.assertIn('error:', err.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
