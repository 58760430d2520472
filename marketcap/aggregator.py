from typing import Iterable, List

from .schemas import DisplayRow, MarketRecord, Snapshot
from .signals import classify
from .utils import format_decimal

PRICE_WIDTH = 10
PERCENT_WIDTH = 5
PLACES = 2


def table_row(pair: str, record: MarketRecord) -> DisplayRow:
    return DisplayRow(
        style=classify(record.percent_change),
        cells=[
            pair,
            format_decimal(record.last, PLACES, PRICE_WIDTH),
            format_decimal(record.percent_change, PLACES, PERCENT_WIDTH),
            format_decimal(record.base_volume, PLACES, PRICE_WIDTH),
            format_decimal(record.quote_volume, PLACES, PRICE_WIDTH),
        ],
    )


def sort_rows(rows: Iterable[DisplayRow]) -> List[DisplayRow]:
    # Pair symbols are unique, so ordering on the first cell is total.
    return sorted(rows, key=lambda row: row.cells[0])


def table_rows(snapshot: Snapshot) -> List[DisplayRow]:
    return sort_rows(table_row(pair, record) for pair, record in snapshot.items())
