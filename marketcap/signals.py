from decimal import Decimal
from enum import Enum

STRONG_MOVE = Decimal(3)
MILD_MOVE = Decimal(1)


class RowStyle(str, Enum):
    STRONG_NEGATIVE = "strong_negative"
    MILD_NEGATIVE = "mild_negative"
    NEUTRAL = "neutral"
    MILD_POSITIVE = "mild_positive"
    STRONG_POSITIVE = "strong_positive"


def classify(percent_change: Decimal) -> RowStyle:
    # First match wins; the branches partition the whole real line.
    if percent_change < -STRONG_MOVE:
        return RowStyle.STRONG_NEGATIVE
    if percent_change < -MILD_MOVE:
        return RowStyle.MILD_NEGATIVE
    if percent_change > STRONG_MOVE:
        return RowStyle.STRONG_POSITIVE
    if percent_change > MILD_MOVE:
        return RowStyle.MILD_POSITIVE
    return RowStyle.NEUTRAL
