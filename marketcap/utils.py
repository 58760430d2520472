import re
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, getcontext

from .errors import InvalidNumber

# sign, digits with optional fraction, optional exponent; no NaN/Infinity/underscores
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# quotes beyond 10**±1000 are not market figures and would not fit fixed-point text
MAX_EXPONENT = 1000


def parse_decimal(text: str) -> Decimal:
    # Keeps every digit of the source string, never goes through float.
    if not isinstance(text, str) or not _DECIMAL_RE.fullmatch(text):
        raise InvalidNumber(text)
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise InvalidNumber(text)
    if abs(value.adjusted()) > MAX_EXPONENT:
        raise InvalidNumber(text)
    return value


def round_decimal(value: Decimal, places: int = 2) -> Decimal:
    # Half away from zero; precision grows with the integer part so quantize fits.
    exp = Decimal(1).scaleb(-places)
    prec = max(getcontext().prec, value.adjusted() + places + 2)
    return value.quantize(exp, rounding=ROUND_HALF_UP, context=Context(prec=prec))


def format_decimal(value: Decimal, places: int = 2, width: int = 0) -> str:
    # Fixed-point text padded on the left, wider values are left intact.
    # Sign is kept when a small negative rounds to zero ("-0.00").
    text = f"{round_decimal(value, places):f}"
    return text.rjust(width)
