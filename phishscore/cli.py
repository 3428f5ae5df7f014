"""Command-line front end: score one or more URLs.

Usage: phishscore http://example.com "http://192.168.1.1/login" [--json]
"""
import argparse
import json
import logging
import sys

from phishscore.app.heuristics import VERDICT_LEGITIMATE, analyze_url
from phishscore.app.report import render_table


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="phishscore",
                                description="Heuristic phishing-risk score for URLs")
    p.add_argument("urls", nargs="+", metavar="URL", help="URL(s) to analyze")
    p.add_argument("--json", action="store_true", help="print results as a JSON list")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="logging level (default WARNING)")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    results = [analyze_url(u.strip()) for u in args.urls]

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        for r in results:
            print("=" * 80)
            print("URL:", r.url)
            print(render_table(r))

    # non-zero when anything needs a second look
    return 0 if all(r.verdict == VERDICT_LEGITIMATE for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
