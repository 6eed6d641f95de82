from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, List, Optional

from .parsing import parse_keywords
from .records import KeywordRecord, Number

CSV_HEADER = "kata_pencarian,jumlah_pencarian"


def quote_csv_text(value: str) -> str:
    """Wrap a text field in double quotes, doubling any embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


def format_search_volume(value: Number) -> str:
    """Render a search volume the way a JavaScript Number prints.

    Integers are written exactly. Floats use the shortest round-trip digits,
    drop the decimal point when integral, and switch to exponent notation
    below 1e-6 or from 1e21 upwards (e.g. '1e-7', '1e+21').
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # value == 0.digits * 10**n
    n = exponent + k

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        power = n - 1
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"

    return sign + body


def format_csv_row(record: KeywordRecord) -> str:
    return f"{quote_csv_text(record.keyword)},{format_search_volume(record.search_volume)}"


def to_csv(records: Optional[Iterable[KeywordRecord]]) -> str:
    """Serialize keyword records to CSV text.

    An empty record set produces an empty string, not a lone header.
    Lines are joined with '\\n' and there is no trailing newline.
    """
    rows: List[str] = [format_csv_row(record) for record in (records or [])]
    if not rows:
        return ""
    return "\n".join([CSV_HEADER] + rows)


def convert_to_csv(raw: Optional[str]) -> str:
    """Validate raw JSON text and convert it to CSV in one step."""
    return to_csv(parse_keywords(raw))
