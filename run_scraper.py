"""Convenience script for fetching the news for a match from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure the src directory is on the Python path so the hltvnews package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from hltvnews.config import ScraperConfig  # noqa: E402  (import after path setup)
from hltvnews.exceptions import TeamNotFoundError  # noqa: E402
from hltvnews.services import ArticleRepo, BrowserSession, Summarizer  # noqa: E402


def main(argv: list[str] | None = None) -> None:
    """Resolve, summarise and print the articles for two teams."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("teams", nargs=2, metavar="TEAM", help="HLTV team names, e.g. NAVI FaZe")
    parser.add_argument("--config", type=Path, default=None, help="Path to a settings JSON file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        config = ScraperConfig.load(args.config)
    except (FileNotFoundError, ValueError) as exc:
        logging.error("Could not load settings: %s", exc)
        sys.exit(1)

    with BrowserSession(headless=config.headless) as session:
        repo = ArticleRepo(session, Summarizer(config.model), config=config)
        try:
            articles = repo.find_by_teams(args.teams)
        except TeamNotFoundError as exc:
            logging.error("%s", exc)
            sys.exit(1)

    if repo.last_report is not None:
        for outcome in repo.last_report.skipped:
            logging.info("Skipped %s (%s): %s", outcome.url, outcome.team, outcome.reason)

    print(json.dumps([article.model_dump() for article in articles], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
