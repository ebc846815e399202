"""
Test per le funzioni helper del modulo CLI (senza I/O esterno)
"""
import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from cue_formatter import cli
from cue_formatter.core import BUILTIN_FORMATS


class TestCliHelpers(unittest.TestCase):
    """Test per funzioni pure e di parsing"""

    def test_find_default_config_prefers_tool_specific_name(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(cli.find_default_config(tmp))
            open(os.path.join(tmp, 'config.yaml'), 'w').close()
            self.assertEqual(cli.find_default_config(tmp), os.path.join(tmp, 'config.yaml'))
            open(os.path.join(tmp, 'cue-formatter.yml'), 'w').close()
            self.assertEqual(cli.find_default_config(tmp), os.path.join(tmp, 'cue-formatter.yml'))

    def test_read_cue_text_from_stdin(self):
        with patch('sys.stdin', io.StringIO('TRACK 01 AUDIO\n')):
            self.assertEqual(cli.read_cue_text('-'), 'TRACK 01 AUDIO\n')
        with patch('sys.stdin', io.StringIO('x')):
            self.assertEqual(cli.read_cue_text(None), 'x')

    def test_read_cue_text_delegates_to_service(self):
        with patch('cue_formatter.cli.cue_file_svc.load_cue_file', return_value='text') as mock_load:
            self.assertEqual(cli.read_cue_text('set.cue'), 'text')
            mock_load.assert_called_once_with('set.cue')

    def test_print_formats_and_tokens(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            cli.print_formats(BUILTIN_FORMATS)
            cli.print_tokens()
        out = buf.getvalue()
        self.assertIn('start-title-performer', out)
        self.assertIn('{track_no},{start},{title},{artist}', out)
        self.assertIn('{track_no_padded}', out)
        self.assertIn('Track performer/artist (track-level only)', out)

    def test_parser_options(self):
        args = cli.build_parser().parse_args(['set.cue', '-f', 'csv', '--offset=-00:30', '--output', 'out.txt'])
        self.assertEqual(args.cue_file, 'set.cue')
        self.assertEqual(args.format, 'csv')
        self.assertEqual(args.offset, '-00:30')
        self.assertEqual(args.output_file, 'out.txt')


if __name__ == "__main__":
    unittest.main()
