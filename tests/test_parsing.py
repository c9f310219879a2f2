import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_tailor.parsing.parse import parse_document  # noqa: E402


class ParsingFacadeTests(unittest.TestCase):
    def test_parse_txt_returns_stable_document(self):
        content = "Jane Doe\nEXPERIENCE\n- Bullet item"
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "resume.txt"
            path.write_text(content, encoding="utf-8")

            first = parse_document(path)
            second = parse_document(str(path))
            self.assertEqual(first.source_type, "txt")
            self.assertEqual(first.text, content)
            self.assertEqual(first.doc_id, second.doc_id)
            self.assertEqual(first.parsing_warnings, [])

    def test_parse_docx_keeps_paragraph_lines(self):
        from docx import Document

        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "resume.docx"
            document = Document()
            document.add_paragraph("Jane Doe")
            document.add_paragraph("EXPERIENCE")
            document.add_paragraph("• Shipped the billing API")
            document.save(str(path))

            parsed = parse_document(path)
            self.assertEqual(parsed.source_type, "docx")
            self.assertEqual(parsed.text, "Jane Doe\nEXPERIENCE\n• Shipped the billing API")

    def test_missing_and_unsupported_files(self):
        with self.assertRaises(FileNotFoundError):
            parse_document("does/not/exist.txt")
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "resume.rtf"
            path.write_text("{\\rtf1}", encoding="utf-8")
            with self.assertRaises(NotImplementedError):
                parse_document(path)


if __name__ == "__main__":
    unittest.main()
