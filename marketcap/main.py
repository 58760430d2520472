import logging
import sys

from rich.console import Console

from .aggregator import table_rows
from .collector import fetch_marketcap
from .config import Settings, get_settings
from .errors import MarketCapError
from .parser import parse_snapshot
from .render import render_table, terminal_session

logger = logging.getLogger(__name__)


def run(settings: Settings, console: Console) -> None:
    # fetch -> parse -> classify/format -> sort -> render, once
    with terminal_session(console):
        raw = fetch_marketcap(settings.MARKETCAP_URL, settings.MARKETCAP_TIMEOUT)
        rows = table_rows(parse_snapshot(raw))
        render_table(console, rows, settings.MARKETCAP_MARGIN)


def main() -> int:
    try:
        settings = get_settings()
        logging.basicConfig(
            level=settings.LOG_LEVEL,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        run(settings, Console())
    except MarketCapError as exc:
        logger.debug("Run aborted", exc_info=True)
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    return 0
