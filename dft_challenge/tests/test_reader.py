import math
import tempfile
import unittest
from pathlib import Path

import numpy as np

from dft_challenge.ingest.readers_text import SampleTextReader, SampleTextReaderConfig
from dft_challenge.ingest.synthetic import sampled_sine


class TestSampleTextReader(unittest.TestCase):
    def _write(self, d: str, name: str, text: str) -> Path:
        p = Path(d) / name
        p.write_text(text, encoding="utf-8")
        return p

    def test_one_value_per_line(self):
        with tempfile.TemporaryDirectory() as d:
            x = np.sin(2 * np.pi * np.linspace(0, 1, 50))
            p = self._write(d, "data.csv", "\n".join(repr(float(v)) for v in x) + "\n")
            series = SampleTextReader().read(p)
            self.assertEqual(series.n_samples, 50)
            self.assertTrue(np.allclose(series.values, x, rtol=1e-15, atol=0.0))
            self.assertEqual(series.source, p.resolve())
            self.assertEqual(series.warnings, ())

    def test_mixed_whitespace_commas_and_comments(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "x.txt", "# header\n1 2\t3\n\n4,5 , 6\n   # indented comment\n-7.5e-1\n")
            series = SampleTextReader().read(p)
            self.assertTrue(np.allclose(series.values, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, -0.75], rtol=1e-15, atol=0.0))

    def test_commas_rejected_when_disabled(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "x.csv", "1,2\n")
            reader = SampleTextReader(SampleTextReaderConfig(allow_commas=False))
            with self.assertRaises(ValueError):
                reader.read(p)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(FileNotFoundError):
                SampleTextReader().read(Path(d) / "nope.txt")

    def test_directory_is_rejected(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(ValueError):
                SampleTextReader().read(d)

    def test_non_numeric_token_names_position(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "x.txt", "1.0\n2.0 abc\n3.0\n")
            with self.assertRaises(ValueError) as ctx:
                SampleTextReader().read(p)
            msg = str(ctx.exception)
            self.assertIn("'abc'", msg)
            self.assertIn("line 2", msg)
            self.assertIn("column 2", msg)

    def test_non_finite_tokens_are_kept_with_warning(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "x.txt", "1\nnan\ninf\n-inf\n")
            series = SampleTextReader().read(p)
            v = series.values
            self.assertEqual(v[0], 1.0)
            self.assertTrue(math.isnan(v[1]))
            self.assertEqual(v[2], math.inf)
            self.assertEqual(v[3], -math.inf)
            self.assertTrue(any("non-finite" in w for w in series.warnings))

    def test_empty_file_warns(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "x.txt", "\n# only a comment\n")
            series = SampleTextReader().read(p)
            self.assertEqual(series.n_samples, 0)
            self.assertIn("file contains no samples", series.warnings)

    def test_max_samples_truncates(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "x.txt", "1 2 3 4 5\n")
            series = SampleTextReader(SampleTextReaderConfig(max_samples=3)).read(p)
            self.assertEqual(series.values.tolist(), [1.0, 2.0, 3.0])
            self.assertTrue(any("truncated" in w for w in series.warnings))

    def test_values_are_read_only(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "x.txt", "1 2\n")
            series = SampleTextReader().read(p)
            with self.assertRaises(ValueError):
                series.values[0] = 5.0


class TestSyntheticSine(unittest.TestCase):
    def test_default_is_2000_points_including_endpoint(self):
        s = sampled_sine()
        self.assertEqual(s.n_samples, 2000)
        self.assertEqual(s.source, "synthetic")
        self.assertAlmostEqual(s.values[0], 0.0, places=15)
        self.assertAlmostEqual(s.values[-1], 0.0, places=12)

    def test_cycles_and_amplitude(self):
        s = sampled_sine(8, cycles=2.0, amplitude=3.0, endpoint=False)
        self.assertTrue(np.allclose(s.values, [0, 3, 0, -3, 0, 3, 0, -3], atol=1e-12))

    def test_zero_length_and_negative(self):
        self.assertEqual(sampled_sine(0).n_samples, 0)
        with self.assertRaises(ValueError):
            sampled_sine(-1)


if __name__ == "__main__":
    unittest.main()
