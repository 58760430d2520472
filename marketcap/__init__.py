from .aggregator import sort_rows, table_row, table_rows
from .errors import InvalidNumber, MalformedPayload, MarketCapError, NetworkError, TerminalError
from .parser import parse_snapshot
from .schemas import HEADER, DisplayRow, MarketRecord, Snapshot
from .signals import RowStyle, classify

__version__ = "0.1.0"
