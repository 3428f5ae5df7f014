"""URL parsing used by the heuristic engine.

``urllib.parse`` accepts almost any string, so ``parse_url`` adds the
checks a browser URL parser would make and raises ``MalformedURL`` when
they fail.
"""

import re
from typing import NamedTuple, Optional
from urllib.parse import unquote, urlsplit

SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
# schemes that must carry a host ("file" may have an empty one)
HOST_REQUIRED_SCHEMES = {"http", "https", "ftp", "ws", "wss"}
FORBIDDEN_HOST_CHARS = set(' <>^|\\%"`{}')
C0_AND_SPACE = "".join(chr(c) for c in range(0x21))


class MalformedURL(ValueError):
    """Raised when a string cannot be parsed as a URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"malformed URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class ParsedURL(NamedTuple):
    scheme: str
    hostname: str
    port: Optional[int]
    username: Optional[str]
    path: str
    query: str
    fragment: str


def _normalize_special(candidate: str, rest_at: int) -> str:
    """Rewrite a host-carrying URL as ``scheme://rest``.

    Backslashes before the query count as slashes, and any number of
    slashes (including none) may follow the scheme.
    """
    scheme, rest = candidate[:rest_at - 1], candidate[rest_at:]
    cut = re.search(r"[?#]", rest)
    end = cut.start() if cut else len(rest)
    rest = rest[:end].replace("\\", "/") + rest[end:]
    return f"{scheme}://{rest.lstrip('/')}"


def parse_url(url: str) -> ParsedURL:
    """Parse ``url`` into a ParsedURL or raise MalformedURL."""
    if not isinstance(url, str):
        raise MalformedURL(repr(url), "not a string")

    # surrounding whitespace/control chars are ignored, embedded tabs/newlines dropped
    candidate = url.strip(C0_AND_SPACE)
    candidate = candidate.replace("\t", "").replace("\n", "").replace("\r", "")

    match = SCHEME_RE.match(candidate)
    if not match:
        raise MalformedURL(url, "missing scheme")
    if match.group(0)[:-1].lower() in HOST_REQUIRED_SCHEMES:
        candidate = _normalize_special(candidate, len(match.group(0)))

    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as exc:
        raise MalformedURL(url, str(exc)) from exc

    scheme = parts.scheme.lower()
    hostname = unquote(parts.hostname or "").lower()

    if scheme in HOST_REQUIRED_SCHEMES and not hostname:
        raise MalformedURL(url, "empty host")
    bad = FORBIDDEN_HOST_CHARS.intersection(hostname)
    if bad:
        raise MalformedURL(url, f"forbidden host character {sorted(bad)[0]!r}")

    return ParsedURL(
        scheme=scheme,
        hostname=hostname,
        port=port,
        username=parts.username,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )
