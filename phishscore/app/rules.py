"""Heuristic rule table for URL phishing scoring.

Each rule is a weighted, side-effect-free predicate over the raw URL and
its parsed form. The default table holds five rules; weights are tuned
here and nowhere else.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Tuple

from .urls import ParsedURL

# Tunable thresholds and keyword list
MAX_URL_LENGTH = 75
MAX_HOST_LABELS = 3  # > 3 labels => more than 2 subdomains under a two-label root
SUSPICIOUS_KEYWORDS = ("login", "secure", "verify", "account", "update", "banking")

# Rule weights (points added to the phish score when a rule triggers)
WEIGHT_LONG_URL = 20
WEIGHT_IP_IN_HOST = 40
WEIGHT_AT_SYMBOL = 30
WEIGHT_SUBDOMAIN_DEPTH = 25
WEIGHT_SUSPICIOUS_KEYWORD = 15

# dotted quad of 1-3 digit groups; octets are not range checked
IPV4_HOST_RE = re.compile(r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$", re.ASCII)

Predicate = Callable[[str, ParsedURL], bool]


@dataclass(frozen=True)
class Rule:
    """A named, weighted heuristic."""

    rule_id: str
    name: str
    weight: int
    predicate: Predicate
    description: str

    def check(self, url: str, parsed: ParsedURL) -> bool:
        return bool(self.predicate(url, parsed))


def is_long_url(url: str, parsed: ParsedURL) -> bool:
    return len(url) > MAX_URL_LENGTH


def has_ip_host(url: str, parsed: ParsedURL) -> bool:
    if not parsed.hostname:
        return False
    return IPV4_HOST_RE.match(parsed.hostname) is not None


def has_at_symbol(url: str, parsed: ParsedURL) -> bool:
    return "@" in url


def has_deep_subdomains(url: str, parsed: ParsedURL) -> bool:
    # an IPv4 literal has no subdomains even though it splits into four labels
    if has_ip_host(url, parsed):
        return False
    return len(parsed.hostname.split(".")) > MAX_HOST_LABELS


def has_suspicious_keyword(url: str, parsed: ParsedURL) -> bool:
    lower = url.lower()
    return any(k in lower for k in SUSPICIOUS_KEYWORDS)


class RuleRegistry:
    """Immutable, ordered collection of rules keyed by ``rule_id``.

    Iteration order is the order the rules were given in, which is also
    the evaluation and display order.
    """

    def __init__(self, rules: Iterable[Rule]):
        ordered = tuple(rules)
        by_id = {}
        for rule in ordered:
            if rule.rule_id in by_id:
                raise ValueError(f"duplicate rule id: {rule.rule_id}")
            if isinstance(rule.weight, bool) or not isinstance(rule.weight, int) or rule.weight <= 0:
                raise ValueError(f"rule {rule.rule_id} needs a positive integer weight, got {rule.weight!r}")
            by_id[rule.rule_id] = rule
        self._rules = ordered
        self._by_id = MappingProxyType(by_id)

    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def get(self, rule_id: str) -> Rule:
        return self._by_id[rule_id]

    def ids(self) -> Tuple[str, ...]:
        return tuple(r.rule_id for r in self._rules)

    @property
    def total_weight(self) -> int:
        """Highest score this rule set can award."""
        return sum(r.weight for r in self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id) -> bool:
        return rule_id in self._by_id

    def __repr__(self) -> str:
        return f"RuleRegistry({list(self.ids())!r})"


DEFAULT_RULES = (
    Rule(
        rule_id="urlLength",
        name="AI Feature 1: URL Length (> 75 chars)",
        weight=WEIGHT_LONG_URL,
        predicate=is_long_url,
        description="Long URLs can obscure suspicious domains.",
    ),
    Rule(
        rule_id="ipAddressInHost",
        name="AI Feature 2: IP Address in Hostname",
        weight=WEIGHT_IP_IN_HOST,
        predicate=has_ip_host,
        description="IP addresses bypass domain safety checks.",
    ),
    Rule(
        rule_id="atSymbolPresence",
        name="AI Feature 3: '@' Symbol",
        weight=WEIGHT_AT_SYMBOL,
        predicate=has_at_symbol,
        description="'@' symbol can redirect to malicious targets.",
    ),
    Rule(
        rule_id="subdomainDepth",
        name="AI Feature 4: Excessive Subdomain Depth (>2)",
        weight=WEIGHT_SUBDOMAIN_DEPTH,
        predicate=has_deep_subdomains,
        description="Too many subdomains may hide malicious roots.",
    ),
    Rule(
        rule_id="suspiciousKeywords",
        name="AI Feature 5: Suspicious Keywords",
        weight=WEIGHT_SUSPICIOUS_KEYWORD,
        predicate=has_suspicious_keyword,
        description="Keywords used to trigger urgency.",
    ),
)

DEFAULT_REGISTRY = RuleRegistry(DEFAULT_RULES)
