"""Explainable URL heuristic engine for phishing detection.

Public function:
    analyze_url(url: str) -> AnalysisResult

Every rule in the registry is run against the URL; triggered rules add
their weight to the phish score, and the score is mapped to one of three
verdict tiers. A URL that cannot be parsed is treated as maximally
suspicious rather than rejected.

Example:
    >>> from phishscore.app.heuristics import analyze_url
    >>> analyze_url("http://192.168.1.1/login").phish_score
    55
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .rules import DEFAULT_REGISTRY, RuleRegistry
from .urls import MalformedURL, parse_url

logger = logging.getLogger(__name__)

# Verdict thresholds (inclusive lower bounds, checked high to low)
HIGH_RISK_THRESHOLD = 70
MEDIUM_RISK_THRESHOLD = 30

VERDICT_HIGH = "Phishing Risk: High"
VERDICT_MEDIUM = "Suspicious Risk: Medium"
VERDICT_LEGITIMATE = "Legitimate"
VERDICT_INVALID = "Error: Invalid URL"

COLOR_PHISHING = "phishing"
COLOR_SUSPICIOUS = "suspicious"
COLOR_LEGITIMATE = "legitimate"

# score reported for URLs that fail to parse
INVALID_URL_SCORE = 100


@dataclass(frozen=True)
class FeatureResult:
    rule_id: str
    name: str
    score: int
    max_score: int
    is_triggered: bool
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "name": self.name,
            "score": self.score,
            "max_score": self.max_score,
            "is_triggered": self.is_triggered,
            "description": self.description,
        }


@dataclass(frozen=True)
class AnalysisResult:
    url: str
    phish_score: int
    verdict: str
    color_class: str
    feature_results: Tuple[FeatureResult, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.verdict == VERDICT_INVALID

    @property
    def triggered(self) -> Tuple[FeatureResult, ...]:
        return tuple(f for f in self.feature_results if f.is_triggered)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "phish_score": self.phish_score,
            "verdict": self.verdict,
            "color_class": self.color_class,
            "feature_results": [f.to_dict() for f in self.feature_results],
        }


def classify_score(score: int) -> Tuple[str, str]:
    """Map a phish score to ``(verdict, color_class)``."""
    if score >= HIGH_RISK_THRESHOLD:
        return VERDICT_HIGH, COLOR_PHISHING
    if score >= MEDIUM_RISK_THRESHOLD:
        return VERDICT_MEDIUM, COLOR_SUSPICIOUS
    return VERDICT_LEGITIMATE, COLOR_LEGITIMATE


def invalid_url_result(url: str) -> AnalysisResult:
    return AnalysisResult(
        url=url,
        phish_score=INVALID_URL_SCORE,
        verdict=VERDICT_INVALID,
        color_class=COLOR_PHISHING,
        feature_results=(),
    )


def analyze_url(url: str, registry: RuleRegistry = DEFAULT_REGISTRY) -> AnalysisResult:
    """
    Score ``url`` against every rule in ``registry``.

    Rules see the URL exactly as given; trimming is left to the caller.
    Feature results come back in registry order whether or not a rule
    triggered.
    """
    try:
        parsed = parse_url(url)
    except MalformedURL as exc:
        logger.info("Invalid URL, failing closed: %s", exc.reason)
        return invalid_url_result(url)

    phish_score = 0
    features = []
    for rule in registry:
        triggered = rule.check(url, parsed)
        score = rule.weight if triggered else 0
        phish_score += score
        features.append(FeatureResult(
            rule_id=rule.rule_id,
            name=rule.name,
            score=score,
            max_score=rule.weight,
            is_triggered=triggered,
            description=rule.description,
        ))

    verdict, color_class = classify_score(phish_score)
    logger.debug("Analyzed %s: score=%d verdict=%s", url, phish_score, verdict)

    return AnalysisResult(
        url=url,
        phish_score=phish_score,
        verdict=verdict,
        color_class=color_class,
        feature_results=tuple(features),
    )


# Simple CLI / quick tests
if __name__ == "__main__":
    test_urls = [
        "http://example.com",  # safe
        "http://192.168.1.1/login",  # ip + keyword
        "http://a.b.c.d.example.com/verify-account",  # subdomain depth + keyword
        "http://user@192.168.1.1/secure/login?account=verify&session=abcdef0123456789",
        "not a url",
    ]

    for u in test_urls:
        res = analyze_url(u)
        print("=" * 80)
        print("URL:", u)
        print("Score:", res.phish_score, "Verdict:", res.verdict)
        for f in res.feature_results:
            print(f"- {f.name}: {f.score}/{f.max_score}")
        print()
