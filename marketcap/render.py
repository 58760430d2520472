import logging
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, List, Optional

from rich.console import Console
from rich.errors import ConsoleError
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.table import Table

from .errors import TerminalError
from .schemas import HEADER, DisplayRow
from .signals import RowStyle

logger = logging.getLogger(__name__)

TITLE = "MarketCap"

ROW_STYLES = {
    RowStyle.STRONG_NEGATIVE: Style(color="red", bold=True),
    RowStyle.MILD_NEGATIVE: Style(color="bright_red"),
    RowStyle.NEUTRAL: Style(color="white", blink=True),
    RowStyle.MILD_POSITIVE: Style(color="bright_green"),
    RowStyle.STRONG_POSITIVE: Style(color="green", bold=True),
}

# (ratio, fixed width) per column; "%" is the only fixed one
COLUMN_SIZES = [(25, None), (20, None), (None, 10), (25, None), (25, None)]


def build_table(rows: List[DisplayRow], height: Optional[int] = None) -> Panel:
    table = Table(box=None, expand=True, header_style="bold")
    for i, (name, (ratio, width)) in enumerate(zip(HEADER, COLUMN_SIZES)):
        table.add_column(
            name,
            ratio=ratio,
            width=width,
            justify="left" if i == 0 else "right",
            overflow="fold",
        )
    for row in rows:
        table.add_row(*row.cells, style=ROW_STYLES[row.style])
    return Panel(table, title=TITLE, expand=True, height=height)


def render_table(console: Console, rows: List[DisplayRow], margin: int = 5) -> None:
    height = max(console.height - 2 * margin, 3)
    try:
        console.print(Padding(build_table(rows, height), margin))
    except (ConsoleError, OSError) as exc:
        raise TerminalError(f"Unable to draw table: {exc}") from exc


@contextmanager
def terminal_session(console: Console) -> Iterator[Console]:
    # cbreak mode for the whole run; skipped when stdin is not a tty (pipes, tests)
    fd = None
    saved = None
    stdin = sys.stdin
    if stdin is not None and stdin.isatty():
        fd = stdin.fileno()
        try:
            saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"Unable to switch terminal mode: {exc}") from exc
        logger.debug("Terminal fd %d in cbreak mode", fd)
    try:
        console.clear()
        yield console
    except BaseException:
        # the error already in flight is the one worth reporting
        _restore(fd, saved, pending=True)
        raise
    _restore(fd, saved)


def _restore(fd: Optional[int], saved: Optional[list], pending: bool = False) -> None:
    if saved is None:
        return
    try:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    except (termios.error, OSError) as exc:
        if pending:
            logger.warning("Unable to restore terminal mode: %s", exc)
            return
        raise TerminalError(f"Unable to restore terminal mode: {exc}") from exc
    logger.debug("Terminal fd %d restored", fd)
