import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_tailor.normalize.metrics import extract_metrics, metric_spans  # noqa: E402


class MetricExtractionTests(unittest.TestCase):
    def test_families_are_reported_in_order(self):
        metrics = extract_metrics("Cut costs by $1.2M and latency by 35% in 3 months")
        self.assertEqual(metrics, ["35%", "$1.2M", "3 months"])

    def test_multipliers_and_magnitudes(self):
        self.assertEqual(extract_metrics("Made search 5x faster for 2M users"), ["5x faster", "2M"])

    def test_overlapping_matches_are_dropped(self):
        metrics = extract_metrics("Grew revenue 120% to $4B")
        self.assertEqual(metrics, ["120%", "$4B"])

    def test_no_metrics(self):
        self.assertEqual(extract_metrics("Owned the release process"), [])
        self.assertEqual(extract_metrics(""), [])

    def test_metric_spans_cover_metric_text(self):
        text = "Reduced cost by 40%"
        spans = metric_spans(text)
        self.assertIn((16, 19), spans)
        self.assertEqual(text[16:19], "40%")


if __name__ == "__main__":
    unittest.main()
