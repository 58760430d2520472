import logging

from pydantic import TypeAdapter, ValidationError

from .errors import MalformedPayload
from .schemas import Snapshot

logger = logging.getLogger(__name__)

_snapshot_adapter = TypeAdapter(Snapshot)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    where = ".".join(str(part) for part in first["loc"]) or "<root>"
    more = exc.error_count() - 1
    suffix = f" (+{more} more)" if more else ""
    return f"{where}: {first['msg']}{suffix}"


def parse_snapshot(raw: bytes) -> Snapshot:
    # one bad record rejects the whole snapshot
    try:
        snapshot = _snapshot_adapter.validate_json(raw)
    except ValidationError as exc:
        raise MalformedPayload(f"Malformed marketcap payload: {_describe(exc)}") from exc
    logger.debug("Parsed %d pairs", len(snapshot))
    return snapshot
