import io
import os
import unittest
from contextlib import redirect_stdout
from unittest import mock

from game import InvalidConfiguration, Settings, load_settings
from reversi_core import cli
from reversi_core.settings import debug, env_flag, env_int


class TestSettings(unittest.TestCase):
    def test_given_empty_env_when_loading_then_defaults(self):
        self.assertEqual(load_settings({}), Settings())

    def test_given_env_values_when_loading_then_parsed(self):
        s = load_settings({
            'REVERSI_WIDTH': '6',
            'REVERSI_GLYPHS': 'ASCII',
            'HOST': '0.0.0.0',
            'PORT': '8080',
            'FLASK_DEBUG': 'yes',
        })
        self.assertEqual(s, Settings(width=6, glyphs='ascii', host='0.0.0.0', port=8080, flask_debug=True))

    def test_given_debug_fallback_when_flask_debug_unset_then_used(self):
        self.assertTrue(load_settings({'DEBUG': 'on'}).flask_debug)

    def test_given_bad_values_when_loading_then_invalid_configuration(self):
        for env in ({'REVERSI_WIDTH': 'abc'}, {'REVERSI_WIDTH': '7'}, {'REVERSI_WIDTH': '0'},
                    {'REVERSI_GLYPHS': 'html'}, {'PORT': 'x'}):
            with self.assertRaises(InvalidConfiguration):
                load_settings(env)

    def test_given_helpers_when_reading_then_defaults_for_blank(self):
        self.assertEqual(env_int('N', 3, {'N': ' '}), 3)
        self.assertFalse(env_flag('F', '0', {}))
        self.assertTrue(env_flag('F', '0', {'F': 'TRUE'}))

    def test_given_debug_flag_when_tracing_then_printed_only_if_enabled(self):
        buf = io.StringIO()
        with mock.patch.dict(os.environ, {'REVERSI_DEBUG': '1'}), redirect_stdout(buf):
            debug('ai', 'hello')
        self.assertEqual(buf.getvalue(), "[ai] hello\n")
        buf = io.StringIO()
        with mock.patch.dict(os.environ, {'REVERSI_DEBUG': '0'}), redirect_stdout(buf):
            debug('ai', 'hello')
        self.assertEqual(buf.getvalue(), "")


class TestCli(unittest.TestCase):
    def _run(self, inputs, argv):
        buf = io.StringIO()
        with mock.patch('builtins.input', side_effect=inputs), redirect_stdout(buf):
            cli.main(argv)
        return buf.getvalue()

    def test_given_move_then_quit_when_playing_then_both_sides_move(self):
        out = self._run(["3 4", "quit"], ["--ascii"])
        self.assertIn("User X chose to step on 3, 4", out)
        self.assertIn("AI O chose to step on 3, 3", out)

    def test_given_bad_input_when_playing_then_error_printed_and_loop_continues(self):
        out = self._run(["nonsense", "1 1", "", "/show", EOFError], ["--ascii", "--width", "4"])
        self.assertIn("error: Could not understand 'nonsense'", out)
        self.assertIn("error: You can't place a piece at 0, 0", out)
        self.assertIn("  1 2 3 4", out)

    def test_given_odd_width_when_starting_then_argparse_error(self):
        with redirect_stdout(io.StringIO()), mock.patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.main(["--width", "5"])


if __name__ == '__main__':
    unittest.main()
