from __future__ import annotations

import re

# Family order is the order metrics are reported in.
_METRIC_FAMILIES: tuple[re.Pattern[str], ...] = (
    re.compile(r"~?\d[\d,]*(?:\.\d+)?\s*%\+?|~?\d[\d,]*(?:\.\d+)?\+?\s*percent\b", re.IGNORECASE),
    re.compile(
        r"\$\d[\d,]*(?:\.\d+)?[KMB]?\+?(?![A-Za-z])"
        r"|\d[\d,]*(?:\.\d+)?\s*x\s*(?:faster|improvement|increase)"
        r"|(?<![\w.$])\d[\d,]*(?:\.\d+)?[KMB]\+?(?![A-Za-z])",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b\d+\s*(?:hours?|days?|weeks?|months?|years?)\b(?:\s+(?:faster|reduction|ahead|early))?",
        re.IGNORECASE,
    ),
)


def extract_metrics(text: str) -> list[str]:
    """Percentages, then money/multiplier figures, then durations; overlaps dropped."""
    if not text:
        return []
    taken: list[tuple[int, int]] = []
    metrics: list[str] = []
    for pattern in _METRIC_FAMILIES:
        for match in pattern.finditer(text):
            start, end = match.span()
            if any(start < t_end and t_start < end for t_start, t_end in taken):
                continue
            value = match.group(0).strip()
            if not value:
                continue
            taken.append((start, end))
            metrics.append(value)
    return metrics


def metric_spans(text: str) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    for pattern in _METRIC_FAMILIES:
        spans.extend(match.span() for match in pattern.finditer(text or ""))
    return spans
