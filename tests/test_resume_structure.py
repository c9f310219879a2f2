import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_tailor.normalize.resume_structure import parse_resume  # noqa: E402
from ats_tailor.normalize.utils import (  # noqa: E402
    is_bullet_like,
    is_date_line,
    section_for_heading,
    split_role_header,
    strip_bullet_prefix,
)

SAMPLE_RESUME = (PROJECT_ROOT / "tests" / "fixtures" / "sample_resume.txt").read_text(encoding="utf-8")


class ResumeStructureTests(unittest.TestCase):
    def test_sections_and_roles_are_recognized(self):
        parsed = parse_resume(SAMPLE_RESUME)
        self.assertTrue(parsed.has_experience_section)
        self.assertEqual(
            set(parsed.preserved_sections),
            {"header", "summary", "skills", "education"},
        )
        self.assertEqual(parsed.preserved_sections["header"], "Jane Doe\njane.doe@example.com | +1 555 010 2020")
        self.assertEqual(parsed.preserved_sections["skills"], "SKILLS\nPython, SQL, Git")

        self.assertEqual([role.company for role in parsed.roles], ["Acme Corp", "Beta Labs"])
        self.assertEqual([role.title for role in parsed.roles], ["Senior Engineer", "Engineer"])
        self.assertEqual(parsed.roles[0].date_lines, ["Jan 2020 - Present"])
        self.assertEqual(parsed.roles[1].header_line, "Beta Labs | Engineer | Remote")
        self.assertEqual(parsed.total_bullets, 3)

    def test_bullets_keep_text_and_metrics(self):
        parsed = parse_resume(SAMPLE_RESUME)
        first, second = parsed.roles[0].bullets
        self.assertEqual(first.original_text, "Led migration reducing deployment time by 40%")
        self.assertEqual(first.extracted_metrics, ("40%",))
        self.assertEqual(second.extracted_metrics, ("2M",))
        self.assertEqual(parsed.roles[1].bullets[0].extracted_metrics, ("90%",))

    def test_text_without_headings_is_all_header(self):
        parsed = parse_resume("Jane Doe\nBuilt things")
        self.assertEqual(parsed.preserved_sections, {"header": "Jane Doe\nBuilt things"})
        self.assertFalse(parsed.has_experience_section)
        self.assertEqual(parsed.roles, [])

    def test_experience_without_roles_keeps_raw_block(self):
        parsed = parse_resume("Jane Doe\nEXPERIENCE\nFreelance work on many things\n- Shipped a site")
        self.assertTrue(parsed.has_experience_section)
        self.assertEqual(parsed.roles, [])
        self.assertEqual(parsed.experience_block, "EXPERIENCE\nFreelance work on many things\n- Shipped a site")
        self.assertEqual(parsed.experience_preamble, [])

    def test_headings_are_kept_verbatim(self):
        parsed = parse_resume("Jane Doe\n  SKILLS:  \nPython\n EXPERIENCE\nFreelance work")
        self.assertEqual(parsed.preserved_sections["skills"], "  SKILLS:  \nPython")
        self.assertEqual(parsed.experience_block, " EXPERIENCE\nFreelance work")

    def test_empty_input(self):
        parsed = parse_resume("")
        self.assertEqual(parsed.preserved_sections, {})
        self.assertEqual(parsed.total_bullets, 0)

    def test_line_helpers(self):
        self.assertEqual(section_for_heading("Work Experience:"), "experience")
        self.assertEqual(section_for_heading("TECHNICAL PROFICIENCIES"), "technical_proficiencies")
        self.assertIsNone(section_for_heading("Experienced engineer"))
        self.assertTrue(is_bullet_like("▸ Shipped"))
        self.assertFalse(is_bullet_like("-5% churn"))
        self.assertEqual(strip_bullet_prefix("• Shipped v2"), "Shipped v2")
        self.assertTrue(is_date_line("Sep 2018 – Current"))
        self.assertFalse(is_date_line("2018 was a good year"))
        self.assertEqual(split_role_header("Initech | Analyst"), ("Initech", "Analyst"))
        self.assertIsNone(split_role_header("no pipe here"))


if __name__ == "__main__":
    unittest.main()
