from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

# Shipped as package data so non-editable installs find it too.
SCORING_CONFIG_PATH = Path(str(resources.files("ats_tailor.core.config").joinpath("scoring.yaml")))
_MISSING = object()


@lru_cache(maxsize=4)
def load_scoring_config(path: Path = SCORING_CONFIG_PATH) -> dict[str, Any]:
    """Parse the tuning file once per path; an unreadable file is a startup error."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise RuntimeError(f"Scoring config '{path}' must hold a mapping at the top level.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    return load_scoring_config(SCORING_CONFIG_PATH)


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Dot-path lookup, e.g. ``get_scoring_value("scorer.points.keyword_coverage", 50)``."""
    if not path:
        return default
    node: Any = get_scoring_config()
    for part in path.split("."):
        node = node.get(part, _MISSING) if isinstance(node, dict) else _MISSING
        if node is _MISSING:
            return default
    return node
