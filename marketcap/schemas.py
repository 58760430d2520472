from decimal import Decimal
from typing import Annotated, Dict, List

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, StrictStr

from .signals import RowStyle
from .utils import parse_decimal

# Numeric quotes arrive as JSON strings; anything else is rejected before float rounding.
ExactDecimal = Annotated[Decimal, PlainValidator(parse_decimal)]

HEADER = ["Pair", "Price", "%", "Vol.", "Value"]


class MarketRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    average_24h: StrictStr = Field(alias="avg24hr")
    base_volume: ExactDecimal = Field(alias="baseVolume")
    high_24h: StrictStr = Field(alias="high24hr")
    highest_bid: StrictStr = Field(alias="highestBid")
    last: ExactDecimal
    low_24h: StrictStr = Field(alias="low24hr")
    lowest_ask: StrictStr = Field(alias="lowestAsk")
    percent_change: ExactDecimal = Field(alias="percentChange")
    quote_volume: ExactDecimal = Field(alias="quoteVolume")


Snapshot = Dict[str, MarketRecord]


class DisplayRow(BaseModel):
    style: RowStyle
    cells: List[str]  # pair, last, percent change, base volume, quote volume
