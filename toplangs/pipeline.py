"""Fetch -> aggregate -> rank -> render -> write."""

import logging
from pathlib import Path

from toplangs.aggregate import aggregate
from toplangs.errors import EmptyChartError
from toplangs.github import decode_repositories, fetch_repositories
from toplangs.rank import rank
from toplangs.svg import render

logger = logging.getLogger(__name__)


def build_chart(records, top_n, options=None):
    """Turn repository records into a ranking and its SVG markup."""
    totals = aggregate(records)
    logger.info("Languages: %d", len(totals))
    ranking = rank(totals, top_n)
    for entry in ranking:
        logger.info("  %s: %.1f%%", entry.label, entry.percent)
    return ranking, render(ranking, options)


def write_chart(path, markup):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(markup)


def run(config, session=None):
    """Generate the card described by ``config`` and write it to disk.

    Nothing is written unless the whole chart was produced. An empty
    ranking (no language bytes at all) is written as an empty chart unless
    ``config.fail_on_empty`` is set.
    """
    logger.info("Fetching repository languages (top %d)...", config.top_n)
    nodes = fetch_repositories(config.token, session=session)
    records = decode_repositories(nodes)
    logger.info("Repositories: %d", len(records))

    ranking, markup = build_chart(records, config.top_n, config.render)
    if not ranking:
        if config.fail_on_empty:
            raise EmptyChartError("No language data found")
        logger.warning("No language data found, writing an empty chart")

    destination = config.destination
    write_chart(destination, markup)
    logger.info("Wrote %s", destination)
    return destination
