# batch.py
"""
Score a column of URLs in a pandas DataFrame with the heuristic engine.
"""

import logging
from typing import Dict

import pandas as pd

from phishscore.app.heuristics import analyze_url
from phishscore.app.rules import DEFAULT_REGISTRY, RuleRegistry

logger = logging.getLogger(__name__)


def score_frame(df: pd.DataFrame, url_column: str = "url",
                registry: RuleRegistry = DEFAULT_REGISTRY) -> pd.DataFrame:
    """
    Return a copy of ``df`` with phish_score, verdict, color_class and one
    ``rule_<id>`` boolean column per rule added.

    Missing URLs are scored as empty strings, which fail closed.
    """
    if url_column not in df.columns:
        raise KeyError(f"column {url_column!r} not found; available: {list(df.columns)}")

    out = df.copy()
    urls = out[url_column].fillna("").astype(str)

    scores = []
    verdicts = []
    colors = []
    flags = {rule_id: [] for rule_id in registry.ids()}
    for u in urls:
        res = analyze_url(u, registry)
        scores.append(res.phish_score)
        verdicts.append(res.verdict)
        colors.append(res.color_class)
        triggered = {f.rule_id for f in res.triggered}
        for rule_id in flags:
            flags[rule_id].append(rule_id in triggered)

    out["phish_score"] = pd.Series(scores, index=out.index, dtype="int64")
    out["verdict"] = pd.Series(verdicts, index=out.index, dtype="object")
    out["color_class"] = pd.Series(colors, index=out.index, dtype="object")
    for rule_id, values in flags.items():
        out[f"rule_{rule_id}"] = pd.Series(values, index=out.index, dtype="bool")

    logger.info("Scored %d URLs from column %s", len(out), url_column)
    return out


def summarize(scored: pd.DataFrame) -> Dict[str, int]:
    """Count rows per verdict."""
    return {str(k): int(v) for k, v in scored["verdict"].value_counts().items()}
