"""Turn résumé/job files into plain text for the tailoring pipeline."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from .models import SourceDocument

logger = logging.getLogger(__name__)


def _compute_doc_id(text: str, file_path: Path) -> str:
    seed = text if text.strip() else file_path.name
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _read_txt(file_path: Path) -> tuple[str, int | None, list[str]]:
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return text, None, []


def _read_pdf(file_path: Path) -> tuple[str, int | None, list[str]]:
    from pypdf import PdfReader
    from pypdf.errors import PdfReadError

    warnings: list[str] = []
    try:
        reader = PdfReader(str(file_path))
    except PdfReadError as exc:
        return "", None, [f"PDF parsing failed: {exc}"]

    text_parts: list[str] = []
    for page in reader.pages:
        page_text = (page.extract_text() or "").strip()
        if page_text:
            text_parts.append(page_text)
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), len(reader.pages), warnings


def _read_docx(file_path: Path) -> tuple[str, int | None, list[str]]:
    from docx import Document

    warnings: list[str] = []
    document = Document(str(file_path))
    # Paragraph text keeps bullet glyphs typed by the author; list numbering is not rendered.
    paragraphs = [p.text.rstrip() for p in document.paragraphs]
    text = "\n".join(paragraphs).strip("\n")
    if not text.strip():
        warnings.append("No extractable text found in DOCX.")
    return text, None, warnings


_READERS = {
    ".txt": ("txt", _read_txt),
    ".md": ("txt", _read_txt),
    ".pdf": ("pdf", _read_pdf),
    ".docx": ("docx", _read_docx),
}


def parse_document(file_path: str | Path) -> SourceDocument:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")

    extension = path.suffix.lower()
    if extension not in _READERS:
        raise NotImplementedError(
            f"Unsupported file type '{extension}'. Supported types: .txt, .md, .pdf, .docx"
        )

    source_type, reader = _READERS[extension]
    text, page_count, warnings = reader(path)
    for warning in warnings:
        logger.warning("document_parse_warning file=%s: %s", path.name, warning)

    return SourceDocument(
        doc_id=_compute_doc_id(text=text, file_path=path),
        source_type=source_type,
        text=text,
        page_count=page_count,
        parsing_warnings=warnings,
    )
