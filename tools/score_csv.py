"""Score every URL in a CSV file with the PhishScore heuristics.

Usage: python tools/score_csv.py urls.csv scored.csv --column url
"""
import argparse
import json
import logging

import pandas as pd

from phishscore.batch import score_frame, summarize

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("score_csv")


def main():
    p = argparse.ArgumentParser()
    p.add_argument("in_csv")
    p.add_argument("out_csv")
    p.add_argument("--column", default="url", help="name of the URL column")
    args = p.parse_args()

    df = pd.read_csv(args.in_csv)
    scored = score_frame(df, url_column=args.column)
    scored.to_csv(args.out_csv, index=False)
    logger.info("Wrote %d rows to %s", len(scored), args.out_csv)
    print(json.dumps(summarize(scored), indent=2))


if __name__ == "__main__":
    main()
