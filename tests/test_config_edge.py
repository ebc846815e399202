"""
Test aggiuntivi per Config: precedenza CLI>YAML>default, deep-merge e casi bordo.
"""
import tempfile
import os
import unittest
import yaml

from cue_formatter.config import Config


class TestConfigEdge(unittest.TestCase):
    """Casi bordo su caricamento e merge configurazione"""

    def _dump(self, data):
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            yaml.safe_dump(data, f)
            return f.name

    def test_update_from_args_does_not_override_with_none(self):
        path = self._dump({'format': 'csv', 'offset': '+5'})
        try:
            cfg = Config(path)
            cfg.update_from_args({'format': None, 'offset': '-3'})
            self.assertEqual(cfg.get('format'), 'csv')
            self.assertEqual(cfg.get('offset'), '-3')
        finally:
            os.unlink(path)

    def test_formats_are_deep_merged(self):
        path = self._dump({'formats': {
            'mixcloud': {'label': 'Mixcloud', 'template': '{start} {title}'},
        }})
        try:
            cfg = Config(path)
            cfg._deep_merge(cfg.get('formats'), {'mixcloud': {'label': 'MC'}})
            self.assertEqual(cfg.get('formats')['mixcloud'],
                             {'label': 'MC', 'template': '{start} {title}'})
        finally:
            os.unlink(path)

    def test_unknown_keys_are_preserved(self):
        path = self._dump({'unknown_key': 123})
        try:
            self.assertEqual(Config(path).get('unknown_key'), 123)
        finally:
            os.unlink(path)

    def test_yaml_crlf_and_null_values(self):
        content = 'format: csv\r\noutput_file: null\r\n'
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            f.write(content)
            path = f.name
        try:
            cfg = Config(path)
            self.assertEqual(cfg.get('format'), 'csv')
            self.assertIsNone(cfg.get('output_file'))
            self.assertEqual(cfg.get('custom_template'), '{start} {title}')
        finally:
            os.unlink(path)


if __name__ == '__main__':
    unittest.main()
