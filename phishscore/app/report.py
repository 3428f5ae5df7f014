"""Render AnalysisResult objects for tables, charts and verdict banners."""

import re
from typing import Any, Dict, List

from .heuristics import AnalysisResult

FEATURE_PREFIX_RE = re.compile(r"^(?:AI )?Feature \d+: ")

BADGE_TRIGGERED = "\U0001F6A8"
BADGE_CLEAR = "✅"


def strip_feature_prefix(name: str) -> str:
    return FEATURE_PREFIX_RE.sub("", name, count=1)


def chart_series(result: AnalysisResult) -> Dict[str, List[Any]]:
    """One radar axis per rule, valued by the points it awarded."""
    return {
        "labels": [strip_feature_prefix(f.name) for f in result.feature_results],
        "data": [f.score for f in result.feature_results],
        "max": [f.max_score for f in result.feature_results],
    }


def table_rows(result: AnalysisResult) -> List[Dict[str, str]]:
    rows = []
    for f in result.feature_results:
        rows.append({
            "name": f.name,
            "status": "triggered" if f.is_triggered else "clear",
            "badge": BADGE_TRIGGERED if f.is_triggered else BADGE_CLEAR,
            "points": f"{f.score}/{f.max_score}",
            "description": f.description,
        })
    return rows


def verdict_display(result: AnalysisResult) -> Dict[str, Any]:
    return {
        "verdict": result.verdict,
        "phish_score": result.phish_score,
        "css_class": result.color_class,
    }


def render_table(result: AnalysisResult) -> str:
    """Plain-text report: verdict header followed by one line per rule."""
    lines = [f"{result.verdict} (score {result.phish_score})"]
    if result.is_error:
        lines.append("  URL could not be parsed; no rules were evaluated.")
        return "\n".join(lines)

    rows = table_rows(result)
    width = max(len(r["name"]) for r in rows) if rows else 0
    for r in rows:
        lines.append(f"  {r['badge']} {r['name']:<{width}}  ({r['points']})")
        lines.append(f"      {r['description']}")
    return "\n".join(lines)
