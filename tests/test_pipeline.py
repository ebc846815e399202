"""
Test end-to-end della pipeline parse -> offset -> render
"""
import unittest

from cue_formatter.core import format_cue, resolve_template


CUE = '''PERFORMER "Disc Artist"
TRACK 01 AUDIO
  TITLE "Intro"
  INDEX 01 00:01:30
TRACK 02 AUDIO
  TITLE "Drop"
  PERFORMER "Producer"
  INDEX 01 00:04:00
'''


class TestPipeline(unittest.TestCase):

    def test_default_format(self):
        result = format_cue(CUE, resolve_template('start-title-performer'))
        self.assertTrue(result.offset_valid)
        self.assertEqual(result.offset_seconds, 0)
        self.assertEqual(result.track_count, 2)
        self.assertEqual(result.output,
                         "00:01:30 Intro\n00:04:00 Drop by Producer")

    def test_offset_and_csv(self):
        result = format_cue(CUE, resolve_template('csv'), '-00:02:00')
        self.assertEqual(result.output,
                         "1,00:00:00,Intro,\n2,00:02:00,Drop,Producer")
        # I record originali non vengono modificati
        self.assertEqual(result.tracks[0].start_at, "00:01:30")
        self.assertEqual(result.adjusted[0].start_at, "00:00:00")

    def test_invalid_offset_skips_rendering(self):
        result = format_cue(CUE, '{title}', 'abc')
        self.assertFalse(result.offset_valid)
        self.assertIsNone(result.offset_seconds)
        self.assertEqual(result.track_count, 2)
        self.assertEqual(result.adjusted, [])
        self.assertEqual(result.output, '')

    def test_missing_title_block_is_dropped(self):
        cue = 'TRACK 01 AUDIO\n TITLE "A"\n INDEX 01 00:00:01\nTRACK 02 AUDIO\n INDEX 01 00:00:02\n'
        result = format_cue(cue, '{track_no} {title}')
        self.assertEqual(result.track_count, 1)
        self.assertEqual(result.output, '1 A')

    def test_empty_input(self):
        result = format_cue('', '{title}', '+5')
        self.assertEqual(result.tracks, [])
        self.assertEqual(result.output, '')


if __name__ == "__main__":
    unittest.main()
