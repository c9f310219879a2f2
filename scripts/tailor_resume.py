from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_tailor.core.config import settings  # noqa: E402
from ats_tailor.parsing.parse import parse_document  # noqa: E402
from ats_tailor.services.tailor_service import TailorInputError, run_tailoring  # noqa: E402

logger = logging.getLogger("tailor_resume")


def _summary(report) -> str:
    before = report.score_before.total
    after = report.score_after.total
    lines = [
        f"Match score: {before} -> {after} ({report.status.label})",
        f"Keyword coverage: {report.injection.coverage_percent}%",
        f"Bullets modified: {report.stats.bullets_modified}/{report.stats.bullets_total}",
        f"Fingerprint: {report.fingerprint}",
    ]
    if report.injection.missing_after_injection:
        missing = ", ".join(keyword.term for keyword in report.injection.missing_after_injection[:10])
        lines.append(f"Still missing: {missing}")
    if report.warnings:
        lines.append(f"Warnings: {', '.join(report.warnings)}")
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Tailor a résumé to a job description for ATS keyword coverage.")
    parser.add_argument("--resume", required=True, help="Résumé file (.txt, .md, .pdf, .docx)")
    parser.add_argument("--job", required=True, help="Job description file (.txt, .md, .pdf, .docx)")
    parser.add_argument("--out", help="Write the tailored résumé text here instead of stdout")
    parser.add_argument("--max-keywords", type=int, default=None, help="Number of ranked keywords to use")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible connector choice")
    parser.add_argument("--location", default=None, help="Location line to add under the name")
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(message)s")

    try:
        resume = parse_document(args.resume)
        job = parse_document(args.job)
        report = run_tailoring(
            resume.text,
            job.text,
            max_keywords=args.max_keywords,
            seed=args.seed,
            location=args.location,
        )
    except (FileNotFoundError, NotImplementedError, TailorInputError) as exc:
        logger.error("tailor_failed: %s", exc)
        return 2

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(report.tailored_text, encoding="utf-8")
        logger.info("Saved %s chars to %s", len(report.tailored_text), out_path)

    if args.json:
        print(json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False))
    elif args.out:
        print(_summary(report))
    else:
        print(report.tailored_text)
        print()
        print(_summary(report), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
