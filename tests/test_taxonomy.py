import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_tailor.taxonomy.local_taxonomy import LocalTaxonomy, fold_term  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def test_synonym_normalization_resolves_canonical_key(self):
        taxonomy = LocalTaxonomy()
        normalized, canonical = taxonomy.normalize_term("Front-End")
        self.assertEqual(normalized, "front end")
        self.assertEqual(canonical, "frontend")
        self.assertEqual(taxonomy.canonical_key("K8s"), "kubernetes")
        self.assertEqual(taxonomy.canonical_key("Postgres"), "postgresql")

    def test_unknown_terms_fold_to_themselves(self):
        taxonomy = LocalTaxonomy()
        self.assertEqual(taxonomy.normalize_term("Terraform"), ("terraform", None))
        self.assertEqual(taxonomy.canonical_key("Cross-Functional"), "cross functional")

    def test_fold_term_collapses_whitespace_and_hyphens(self):
        self.assertEqual(fold_term("  Data -  Driven  "), "data driven")
        self.assertEqual(fold_term(""), "")


if __name__ == "__main__":
    unittest.main()
