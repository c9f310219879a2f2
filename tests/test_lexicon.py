import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_tailor.lexicon import build_lexicon, get_default_lexicon  # noqa: E402


class LexiconTests(unittest.TestCase):
    def test_categorize_uses_first_matching_category(self):
        lexicon = get_default_lexicon()
        self.assertEqual(lexicon.categorize("python"), ("technical", 3.0))
        self.assertEqual(lexicon.categorize("agile"), ("skills", 2.5))
        self.assertEqual(lexicon.categorize("pmp"), ("certifications", 2.0))
        self.assertEqual(lexicon.categorize("certified kubernetes administrator"), ("certifications", 2.0))
        self.assertEqual(lexicon.categorize("led"), ("action_verbs", 1.5))
        self.assertEqual(lexicon.categorize("fintech"), ("industry", 1.0))
        self.assertEqual(lexicon.categorize("widget"), ("general", 1.0))

    def test_category_terms_match_whole_keys_only(self):
        lexicon = get_default_lexicon()
        self.assertEqual(lexicon.categorize("javascript")[0], "technical")
        self.assertEqual(lexicon.categorize("pythonic")[0], "general")
        self.assertEqual(lexicon.categorize("less")[0], "general")
        self.assertEqual(lexicon.categorize("rest apis")[0], "technical")
        self.assertTrue(lexicon.is_stop_word("spring"))

    def test_default_lexicon_is_shared(self):
        self.assertIs(get_default_lexicon(), get_default_lexicon())

    def test_build_lexicon_accepts_overrides(self):
        lexicon = build_lexicon(weights={"technical": 5.0}, extra_stop_words={"ninja"})
        self.assertEqual(lexicon.categorize("docker"), ("technical", 5.0))
        self.assertTrue(lexicon.is_stop_word("ninja"))
        self.assertTrue(lexicon.is_stop_word("the"))
        self.assertEqual(
            lexicon.category_names(),
            ("technical", "skills", "certifications", "action_verbs", "industry"),
        )

    def test_non_positive_weight_is_rejected(self):
        with self.assertRaises(ValueError):
            build_lexicon(weights={"skills": 0})


if __name__ == "__main__":
    unittest.main()
