import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_tailor.services.tailor_service import (  # noqa: E402
    TailorInputError,
    generate_filename,
    rank_job_keywords,
    run_tailoring,
    score_against_job,
)

FIXTURES = PROJECT_ROOT / "tests" / "fixtures"
SAMPLE_RESUME = (FIXTURES / "sample_resume.txt").read_text(encoding="utf-8")
SAMPLE_JOB = (FIXTURES / "sample_job.txt").read_text(encoding="utf-8")


class TailorServiceTests(unittest.TestCase):
    def test_tailoring_preserves_facts_and_never_lowers_score(self):
        report = run_tailoring(SAMPLE_RESUME, SAMPLE_JOB, seed=7)

        self.assertEqual(report.warnings, [])
        for company in ("Acme Corp", "Beta Labs"):
            self.assertIn(company, report.tailored_text)
        for title_line in ("Acme Corp | Senior Engineer", "Beta Labs | Engineer | Remote"):
            self.assertIn(title_line, report.tailored_text)
        for metric in ("40%", "2M", "90%"):
            self.assertIn(metric, report.tailored_text)
        self.assertIn("Jan 2020 - Present", report.tailored_text)
        self.assertIn("BSc Computer Science, State University", report.tailored_text)

        self.assertGreaterEqual(report.score_after.total, report.score_before.total)
        self.assertGreater(report.injection.coverage_percent, 0)
        self.assertEqual(report.stats.roles_processed, 2)
        self.assertEqual(report.stats.bullets_total, 3)
        self.assertEqual(report.stats.preserved_companies, ["Acme Corp", "Beta Labs"])
        self.assertEqual(report.status.label, report.status.label.upper())
        self.assertEqual(report.filename, "Applicant_CV.pdf")

    def test_coverage_never_drops_below_untailored_coverage(self):
        skills = "Python, Docker, AWS, Kubernetes, Terraform, PostgreSQL, Redis, Kafka, Jenkins, GraphQL"
        resume = (
            "Jane Doe\n"
            "EXPERIENCE\n"
            "Acme Corp | Engineer\n"
            "Jan 2020 - Present\n"
            "- Owned the quarterly planning cycle for the platform group\n"
            "- Coordinated vendor reviews with finance partners\n"
            "- Wrote onboarding guides for new hires\n"
            "- Ran weekly incident retrospectives\n"
            "- Organized the internal speaker series\n"
            "SKILLS\n"
            f"{skills}\n"
        )
        report = run_tailoring(resume, f"{skills}, Ansible, Airflow", seed=1)

        self.assertEqual(len(report.keywords), 12)
        self.assertEqual(len(report.score_before.found), 10)
        floor = int(100 * len(report.score_before.found) / len(report.keywords) + 0.5)
        self.assertGreaterEqual(report.injection.coverage_percent, floor)
        missing = {keyword.normalized_key for keyword in report.injection.missing_after_injection}
        for keyword in report.score_before.found:
            self.assertNotIn(keyword.normalized_key, missing)

        sample = run_tailoring(SAMPLE_RESUME, SAMPLE_JOB, seed=7)
        sample_floor = int(100 * len(sample.score_before.found) / len(sample.keywords) + 0.5)
        self.assertGreaterEqual(sample.injection.coverage_percent, sample_floor)

    def test_same_seed_is_reproducible(self):
        first = run_tailoring(SAMPLE_RESUME, SAMPLE_JOB, seed=42)
        second = run_tailoring(SAMPLE_RESUME, SAMPLE_JOB, seed=42)
        self.assertEqual(first.tailored_text, second.tailored_text)
        self.assertEqual(first.fingerprint, second.fingerprint)

    def test_rescoring_tailored_text_is_stable(self):
        report = run_tailoring(SAMPLE_RESUME, SAMPLE_JOB, seed=1)
        _, rescored = score_against_job(report.tailored_text, SAMPLE_JOB)
        self.assertEqual(rescored.total, report.score_after.total)

    def test_empty_job_returns_resume_unchanged(self):
        report = run_tailoring(SAMPLE_RESUME, "   ")
        self.assertIn("empty_job_description", report.warnings)
        self.assertEqual(report.keywords, [])
        self.assertEqual(report.score_before.total, 0)
        self.assertEqual(report.injection.coverage_percent, 0)
        self.assertIn("• Led migration reducing deployment time by 40%", report.tailored_text)

    def test_resume_without_experience_is_returned_as_is(self):
        resume = "Jane Doe\nSKILLS\nPython, Docker"
        report = run_tailoring(resume, SAMPLE_JOB)
        self.assertEqual(report.warnings, ["no_experience_section"])
        self.assertEqual(report.tailored_text, resume)
        self.assertGreater(len(report.injection.missing_after_injection), 0)

    def test_empty_resume(self):
        report = run_tailoring("", SAMPLE_JOB)
        self.assertEqual(report.warnings, ["empty_resume"])
        self.assertEqual(report.tailored_text, "")
        self.assertEqual(report.score_after.total, 0)

    def test_location_is_added_to_header(self):
        report = run_tailoring(SAMPLE_RESUME, SAMPLE_JOB, seed=3, location="Remote, EU")
        self.assertEqual(report.tailored_text.split("\n")[1], "Remote, EU")

    def test_invalid_inputs_raise(self):
        with self.assertRaises(TailorInputError) as ctx:
            run_tailoring("x" * 50001, SAMPLE_JOB)
        self.assertEqual(ctx.exception.status_code, 413)
        with self.assertRaises(TailorInputError) as ctx:
            rank_job_keywords(123)
        self.assertEqual(ctx.exception.status_code, 422)
        with self.assertRaises(TailorInputError):
            rank_job_keywords(SAMPLE_JOB, max_keywords=0)

    def test_max_keywords_limits_ranking(self):
        self.assertEqual(len(rank_job_keywords(SAMPLE_JOB, max_keywords=3)), 3)

    def test_generate_filename(self):
        self.assertEqual(generate_filename("Jane", "Doe"), "Jane_Doe_CV.pdf")
        self.assertEqual(generate_filename("Mary Ann", "O'Neil"), "Mary_Ann_ONeil_CV.pdf")
        self.assertEqual(generate_filename(None, None), "Applicant_CV.pdf")
        self.assertEqual(generate_filename("Jane", "Doe", "cover_letter"), "Jane_Doe_Cover_Letter.pdf")


if __name__ == "__main__":
    unittest.main()
